"""
bestfirst - Best-first (A*) search engine with a weighted-grid example domain.
"""
