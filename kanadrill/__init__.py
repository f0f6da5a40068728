import os

# Get the base directory of the package (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Path to the bundled datasets (kanji / vocabulary JSON files)
DATA_DIR = os.path.join(BASE_DIR, 'data')

KANJI_FILE = "kanji_n5.json"
VOCABULARY_FILE = "vocabulary_n5.json"
