"""
unilink: universities that link to teachers without owning them.
"""
