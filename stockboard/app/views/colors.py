# Static color class for consistent use across the app


class Colors:
    # Semantic: Gain (Emerald instead of "Grass Green")
    green = "#059669"  # Emerald 600

    # Semantic: Loss
    red = "#dc2626"  # Red 600 (Clear, but not glaring)

    # Unchanged
    gray = "#4b5563"  # Cool Gray


# Text color of the change column by sign
CHANGE_COLORS = {
    "positive": Colors.green,
    "negative": Colors.red,
    "neutral": Colors.gray,
}
