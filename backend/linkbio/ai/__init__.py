"""
AI issue analysis backed by Perplexity.
"""
