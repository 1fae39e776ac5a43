"""
Category presentation defaults and the sample data set.
Icons are SF Symbol glyph names; colors are hex tokens.
"""

DEFAULT_ICON = "tag.fill"
DEFAULT_COLOR = "#4ECDC4"

# Category picker - icons
AVAILABLE_ICONS = [
    "fork.knife",
    "car.fill",
    "bag.fill",
    "tv.fill",
    "bolt.fill",
    "heart.fill",
    "house.fill",
    "airplane",
    "tram.fill",
    "gift.fill",
    "cart.fill",
    "creditcard.fill",
    "phone.fill",
    "book.fill",
    "gamecontroller.fill",
    "music.note",
    "film.fill",
    "camera.fill",
    "paintbrush.fill",
    "hammer.fill",
]

# Category picker - colors
AVAILABLE_COLORS = [
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#96CEB4",
    "#FECA57",
    "#FF6B9D",
    "#95E1D3",
    "#A8E6CF",
    "#C7CEEA",
    "#FFDAA5",
    "#FFB6C1",
    "#87CEEB",
    "#98D8C8",
    "#F7DC6F",
    "#BB8FCE",
]

# Preview data - categories as (name, icon, color)
SAMPLE_CATEGORIES = [
    ("Food & Dining", "fork.knife", "#FF6B6B"),
    ("Transportation", "car.fill", "#4ECDC4"),
    ("Shopping", "bag.fill", "#45B7D1"),
    ("Entertainment", "tv.fill", "#96CEB4"),
    ("Bills & Utilities", "bolt.fill", "#FECA57"),
    ("Healthcare", "heart.fill", "#FF6B9D"),
    ("Income", "dollarsign.circle.fill", "#95E1D3"),
]

# Preview data - transactions as (note, signed amount, category name, days before today)
SAMPLE_TRANSACTIONS = [
    ("Grocery Store", "-85.50", "Food & Dining", 2),
    ("Gas Station", "-45.00", "Transportation", 3),
    ("Amazon Purchase", "-125.99", "Shopping", 4),
    ("Netflix Subscription", "-15.99", "Entertainment", 5),
    ("Electric Bill", "-120.00", "Bills & Utilities", 6),
    ("Doctor Visit", "-150.00", "Healthcare", 7),
    ("Salary", "3500.00", "Income", 8),
    ("Restaurant", "-65.00", "Food & Dining", 9),
    ("Uber Ride", "-25.00", "Transportation", 10),
    ("Clothing Store", "-200.00", "Shopping", 11),
]
