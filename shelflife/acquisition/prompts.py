"""Instructions sent to the generative AI tiers."""

RECEIPT_PROMPT = """\
Extract food items from this receipt.
Return a JSON array with these exact fields:
- name (string)
- quantity (string, e.g. "1 unit", "10 count")
- category (string, exactly one of: Fridge, Pantry, Freezer, Cabinet, Countertop, Spice Rack)
- estimatedExpiryDays (number)
- estimatedPrice (number, ONLY use the final total price for the line item. \
Do NOT use the unit price. Example: if line says "2 @ $0.89 $1.78", use 1.78).

Ignore non-food items like "Tax", "Total", "Subtotal", "Card", "Auth", "Change".
"""

RECIPE_PROMPT = """\
Suggest {count} recipes for: {items}.
Return a JSON array with these exact fields:
- title (string)
- ingredients (array of strings)
- instructions (array of strings)
- estimatedTime (string)
- difficulty (string, one of: Easy, Medium, Hard)
- youtubeSearchQuery (string: a concise search query to find a video tutorial \
for this specific recipe, e.g. "how to make creamy mushroom pasta")
"""
