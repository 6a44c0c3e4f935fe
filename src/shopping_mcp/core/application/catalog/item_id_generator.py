def generate_item_id(source: str, link: str) -> str:
    """Derive the cart identifier of a catalog item from its source and link.

    Path separators in the link become hyphens. Not collision-free: two links
    that differ only in ``/`` versus ``-`` map to the same identifier.
    """
    return f"{source}-{link.replace('/', '-')}"
