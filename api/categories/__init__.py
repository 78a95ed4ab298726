"""
Categories: the groups posts are filed under.
"""
