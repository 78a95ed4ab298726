"""
Users, access tokens and the dependencies that guard write endpoints.
"""
