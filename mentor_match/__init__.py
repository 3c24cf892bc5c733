# mentor_match/__init__.py
