"""
Core domain: models, vocabulary, validators and record building.
"""
