"""
Circle fitting for measured 2-D point lists
"""
