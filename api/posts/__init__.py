"""
Posts: articles grouped by category.
"""
