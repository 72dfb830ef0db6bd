"""Like/dislike votes on articles and comments."""
