def clean_text(s):
    """Trim surrounding whitespace; interior runs are kept as the page has them."""
    return (s or "").strip()
