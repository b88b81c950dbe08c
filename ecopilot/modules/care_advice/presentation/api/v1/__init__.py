from .tavily import tavily_router

__all__ = ["tavily_router"]
