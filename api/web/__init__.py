"""
Built frontend bundle and the not-found page.
"""
