#!/usr/bin/env python3
"""
Setup script for the sprie spell checker.
Installs dependencies and builds data/dictionary.txt.
"""

import os
import subprocess
import sys
import urllib.request

from sprie.words import clean_word, is_valid_word

PACKAGES = [
    'numpy',   # Edit-distance table
    'pytest',  # Test runner
]

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')
DICT_PATH = os.path.join(DATA_DIR, 'dictionary.txt')
SYSTEM_DICTS = ['/usr/share/dict/words', '/usr/dict/words']
URLS = [
    "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt",
]

HEADER = """\
# sprie dictionary
# One word per line.  Lines starting with # are comments.
"""


def install_packages():
    """Install required Python packages."""
    print("Installing Python packages...")
    for pkg in PACKAGES:
        print(f"  Installing {pkg}...")
        try:
            subprocess.check_call(
                [sys.executable, '-m', 'pip', 'install', pkg, '-q'],
                stderr=subprocess.STDOUT,
            )
        except subprocess.CalledProcessError as exc:
            print(f"  ✗ Failed to install {pkg} (exit code {exc.returncode})")
            print(f"    Try manually: pip install {pkg}")
    print("✓ Python packages installed.\n")


def write_dictionary(words, path):
    """Write the valid, lowercased *words* to *path*, sorted and unique.
    Returns the number of words written."""
    cleaned = set()
    for word in words:
        word = clean_word(word.strip()).lower()
        if is_valid_word(word):
            cleaned.add(word)

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(HEADER)
        for word in sorted(cleaned):
            f.write(word + '\n')
    return len(cleaned)


def read_word_list(path):
    with open(path, encoding='utf-8', errors='ignore') as f:
        return [line for line in f if line.strip() and not line.startswith('#')]


def build_dictionary(dict_path=DICT_PATH):
    """Build the dictionary from the system word list or a download."""
    if os.path.exists(dict_path):
        with open(dict_path, encoding='utf-8') as f:
            count = sum(1 for line in f if line.strip() and not line.startswith('#'))
        print(f"Dictionary already exists: {dict_path} ({count:,} words)")
        return True

    for system_dict in SYSTEM_DICTS:
        if os.path.exists(system_dict):
            print(f"  Using system dictionary: {system_dict}")
            count = write_dictionary(read_word_list(system_dict), dict_path)
            print(f"✓ Dictionary created: {count:,} words → {dict_path}")
            return True

    for url in URLS:
        try:
            print(f"  Trying {url}...")
            with urllib.request.urlopen(url, timeout=30) as resp:
                words = resp.read().decode('utf-8', errors='ignore').splitlines()
            count = write_dictionary(words, dict_path)
            print(f"✓ Dictionary downloaded: {count:,} words")
            return True
        except OSError as e:
            print(f"  Failed: {e}")

    print("\n⚠ Could not build a dictionary automatically.")
    print("  Save a word list (one word per line) as:")
    print(f"  {dict_path}")
    return False


def main():
    print("=" * 50)
    print("  sprie — Setup")
    print("=" * 50)
    print()

    install_packages()
    os.makedirs(DATA_DIR, exist_ok=True)
    build_dictionary()

    print()
    print("=" * 50)
    print("  Setup complete! Quick start:")
    print()
    print("    sprie document.txt")
    print("    sprie --file document.txt --output report.txt")
    print('    echo "helo wrold" | sprie')
    print("=" * 50)


if __name__ == '__main__':
    main()
