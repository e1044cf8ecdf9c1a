"""
Reader package — everything between a file on disk and a stream of row dicts.

Modules
-------
separator
    Separator detection from a sample of the file.
rows
    Record tokenising (stdlib ``csv``) and the row iteration driver.
"""
