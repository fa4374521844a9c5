"""Dictionary lookup: scrapes pronunciation, part of speech and definition for a word."""
