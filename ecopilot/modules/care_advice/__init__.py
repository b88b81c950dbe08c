"""
Care Advice Module

Plant care information from the Tavily search API, with a built-in
knowledge base used whenever the search is unavailable.
"""
