"""
Services of the storefront app (catalog records, store and filters).
"""
