"""
/**
 * @file dashboard/__init__.py
 * @description WM Tools dashboard package.
 */
"""
