"""
Seed catalog for the demo storefront.

Prices are in USD. Names deliberately reuse the words the assistant's keyword
rules look for ("Laptop", "Computer", "Smartphone", "Phone") so every intent
has something to recommend.
"""

from storefront_toolkit.catalog.base import Product


def _product(
    product_id: str,
    name: str,
    category: str,
    price: float,
    rating: float,
    review_count: int,
    description: str,
    features: tuple[str, ...],
    in_stock: bool = True,
) -> Product:
    return Product(
        id=product_id,
        name=name,
        category=category,
        price=price,
        rating=rating,
        review_count=review_count,
        in_stock=in_stock,
        description=description,
        features=features,
        image_url=f"https://picsum.photos/seed/storefront-{product_id}/400/300",
    )


PRODUCTS: list[Product] = [
    _product(
        "1", "UltraBook Pro Laptop 15", "Electronics", 1299.99, 4.7, 842,
        "Thin and light 15-inch laptop with all-day battery life.",
        ("15.6-inch OLED display", "16GB RAM", "1TB SSD", "18-hour battery"),
    ),
    _product(
        "2", "Gaming Laptop X17", "Electronics", 1899.00, 4.6, 391,
        "17-inch gaming laptop with a high refresh rate panel.",
        ("RTX graphics", "240Hz display", "32GB RAM", "RGB keyboard"),
    ),
    _product(
        "3", "Compact Desktop Computer", "Electronics", 749.00, 4.3, 158,
        "Small form factor desktop for home and office.",
        ("8-core CPU", "16GB RAM", "512GB SSD", "Wi-Fi 6"),
    ),
    _product(
        "4", "Chromebook Student Laptop", "Electronics", 299.99, 4.1, 1204,
        "Affordable laptop for schoolwork and browsing.",
        ("11.6-inch display", "64GB storage", "10-hour battery"),
    ),
    _product(
        "5", "Galaxy Nova Smartphone", "Electronics", 899.00, 4.5, 2310,
        "Flagship smartphone with a triple camera system.",
        ("6.7-inch AMOLED", "108MP camera", "5G", "Fast charging"),
    ),
    _product(
        "6", "Pixel Lite Phone", "Electronics", 399.00, 4.4, 967,
        "Clean Android experience at a mid-range price.",
        ("6.1-inch display", "Night mode camera", "3 years of updates"),
        in_stock=False,
    ),
    _product(
        "7", "Wireless Noise-Cancelling Headphones", "Electronics", 249.99, 4.8, 3105,
        "Over-ear headphones with adaptive noise cancellation.",
        ("30-hour battery", "Bluetooth 5.3", "Multipoint pairing"),
    ),
    _product(
        "8", "The Pragmatic Programmer", "Books", 39.99, 4.8, 5120,
        "Classic guide to software craftsmanship.",
        ("20th anniversary edition", "Hardcover", "352 pages"),
    ),
    _product(
        "9", "Dune", "Books", 12.99, 4.7, 18034,
        "Frank Herbert's science fiction epic.",
        ("Paperback", "896 pages"),
    ),
    _product(
        "10", "Atomic Habits", "Books", 16.50, 4.6, 40211,
        "Practical strategies for building good habits.",
        ("Hardcover", "320 pages"),
    ),
    _product(
        "11", "The Midnight Library", "Books", 14.99, 4.2, 9120,
        "A novel about the lives we could have lived.",
        ("Paperback", "304 pages"),
    ),
    _product(
        "12", "Classic Cotton T-Shirt", "Clothing", 19.99, 4.3, 2240,
        "Soft crew-neck shirt in organic cotton.",
        ("100% organic cotton", "Machine washable", "Sizes XS-XXL"),
    ),
    _product(
        "13", "Slim Fit Denim Jeans", "Clothing", 59.50, 4.4, 1533,
        "Stretch denim jeans with a modern slim cut.",
        ("Stretch denim", "Five-pocket styling"),
    ),
    _product(
        "14", "Merino Wool Sweater", "Clothing", 89.00, 4.6, 612,
        "Lightweight merino sweater for layering.",
        ("Merino wool", "Odor resistant", "Ribbed cuffs"),
    ),
    _product(
        "15", "Waterproof Hiking Jacket", "Clothing", 179.00, 4.5, 488,
        "Breathable shell for wet-weather hikes.",
        ("Waterproof membrane", "Packable hood", "Pit zips"),
    ),
    _product(
        "16", "Ceramic Plant Pot Set", "Home & Garden", 34.99, 4.2, 377,
        "Set of three glazed pots with drainage trays.",
        ("3 sizes", "Drainage holes", "Bamboo trays"),
    ),
    _product(
        "17", "Robot Vacuum Cleaner", "Home & Garden", 549.00, 4.4, 1876,
        "Self-emptying robot vacuum with lidar mapping.",
        ("Lidar navigation", "Self-emptying base", "App control"),
    ),
    _product(
        "18", "Espresso Machine Deluxe", "Home & Garden", 699.00, 4.7, 934,
        "Dual-boiler espresso machine with a built-in grinder.",
        ("Dual boiler", "Conical burr grinder", "Steam wand"),
    ),
    _product(
        "19", "Non-Slip Yoga Mat", "Sports", 45.00, 4.6, 2789,
        "Extra-thick mat with alignment lines.",
        ("6mm thick", "Non-slip surface", "Carry strap"),
    ),
    _product(
        "20", "Carbon Road Bike", "Sports", 2499.00, 4.9, 143,
        "Lightweight carbon frame road bike.",
        ("Carbon frame", "22-speed groupset", "Disc brakes"),
    ),
    _product(
        "21", "Adjustable Dumbbells", "Sports", 329.00, 4.5, 1455,
        "Pair of dial-adjustable dumbbells from 5 to 52.5 lb.",
        ("Quick dial adjustment", "Space saving", "Storage tray"),
    ),
]
