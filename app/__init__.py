"""
Command line front end and report rendering (rich tables / CSV).
"""
