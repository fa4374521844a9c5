"""Review scheduling: staged spaced-repetition policy and study sessions."""
