"""
Sponsors: logos and links shown until their expiry date.
"""
