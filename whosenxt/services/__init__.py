"""
Services composing ports and components.

- storefront.py: marketplace store listings and member pricing
"""
