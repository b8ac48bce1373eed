"""
Play Store Version Lookup

Looks up the currently published version of a Google Play application by
reading its store page, trying in order:
- ld+json structured data
- the "Current Version" row of the additional information table
- a fixed position among the page's value cells
"""

__version__ = "1.0.0"
