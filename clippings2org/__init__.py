"""Convert Kindle 'My Clippings.txt' exports into Org-mode outlines."""

__version__ = "0.1.0"
