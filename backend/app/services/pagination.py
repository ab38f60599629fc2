def page_offset(page: int, limit: int) -> int:
    """Zero-based offset of the first parent on a 1-based page"""
    return (page - 1) * limit
