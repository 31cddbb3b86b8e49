"""Demo data the storefront starts with.

Kept in the same raw shape the JSON repositories write to disk, so a
fresh data directory is simply initialised with these records.
"""

from __future__ import annotations

SEED_PRODUCTS: list[dict] = [
    {
        "id": 1,
        "name": "Wireless Bluetooth Headphones",
        "description": "Premium over-ear headphones with active noise cancellation, "
        "30-hour battery life, and crystal-clear sound quality.",
        "price": "79.99",
        "image": "https://picsum.photos/seed/headphones/400/400",
        "category": "Electronics",
        "rating": 4.5,
        "stock": 15,
    },
    {
        "id": 2,
        "name": "Smart Watch Pro",
        "description": "Smartwatch with heart rate monitoring, GPS tracking, sleep "
        "analysis, and a 7-day battery.",
        "price": "199.99",
        "image": "https://picsum.photos/seed/smartwatch/400/400",
        "category": "Electronics",
        "rating": 4.2,
        "stock": 8,
    },
    {
        "id": 3,
        "name": "Portable Bluetooth Speaker",
        "description": "Compact wireless speaker with 360-degree sound, IPX7 "
        "waterproofing, and 12-hour playback.",
        "price": "49.99",
        "image": "https://picsum.photos/seed/speaker/400/400",
        "category": "Electronics",
        "rating": 4.0,
        "stock": 22,
    },
    {
        "id": 4,
        "name": "Classic Denim Jacket",
        "description": "Timeless denim jacket crafted from premium cotton with a "
        "regular fit and button closure.",
        "price": "89.99",
        "image": "https://picsum.photos/seed/denim-jacket/400/400",
        "category": "Clothing",
        "rating": 4.7,
        "stock": 12,
    },
    {
        "id": 5,
        "name": "Running Sneakers Ultra",
        "description": "Lightweight running shoes with responsive cushioning and a "
        "breathable mesh upper.",
        "price": "129.99",
        "image": "https://picsum.photos/seed/sneakers/400/400",
        "category": "Clothing",
        "rating": 4.6,
        "stock": 18,
    },
    {
        "id": 6,
        "name": "Wool Blend Overcoat",
        "description": "Wool blend overcoat with a tailored silhouette, notch lapels, "
        "and a fully lined interior.",
        "price": "159.99",
        "image": "https://picsum.photos/seed/overcoat/400/400",
        "category": "Clothing",
        "rating": 4.3,
        "stock": 5,
    },
    {
        "id": 7,
        "name": "The Art of Clean Code",
        "description": "A guide to writing maintainable, readable, and efficient code, "
        "with refactoring techniques and design patterns.",
        "price": "34.99",
        "image": "https://picsum.photos/seed/coding-book/400/400",
        "category": "Books",
        "rating": 4.8,
        "stock": 30,
    },
    {
        "id": 8,
        "name": "Modern JavaScript Deep Dive",
        "description": "JavaScript from fundamentals to advanced concepts: async "
        "programming, closures, prototypes, and modules.",
        "price": "44.99",
        "image": "https://picsum.photos/seed/js-book/400/400",
        "category": "Books",
        "rating": 4.9,
        "stock": 25,
    },
    {
        "id": 9,
        "name": "Design Patterns Handbook",
        "description": "The 23 classic design patterns with modern examples, UML "
        "diagrams, and code samples.",
        "price": "39.99",
        "image": "https://picsum.photos/seed/patterns-book/400/400",
        "category": "Books",
        "rating": 4.4,
        "stock": 20,
    },
    {
        "id": 10,
        "name": "Ceramic Plant Pot Set",
        "description": "Set of 3 minimalist ceramic pots with drainage holes and "
        "matching saucers.",
        "price": "29.99",
        "image": "https://picsum.photos/seed/plant-pots/400/400",
        "category": "Home",
        "rating": 4.1,
        "stock": 35,
    },
    {
        "id": 11,
        "name": "LED Desk Lamp",
        "description": "Adjustable LED desk lamp with 5 brightness levels, a USB "
        "charging port, and touch controls.",
        "price": "54.99",
        "image": "https://picsum.photos/seed/desk-lamp/400/400",
        "category": "Home",
        "rating": 4.3,
        "stock": 14,
    },
    {
        "id": 12,
        "name": "Scented Candle Collection",
        "description": "Soy wax candle set in lavender, vanilla, cedarwood, and ocean "
        "breeze fragrances.",
        "price": "24.99",
        "image": "https://picsum.photos/seed/candles/400/400",
        "category": "Home",
        "rating": 4.6,
        "stock": 40,
    },
]

SEED_USERS: list[dict] = [
    {
        "id": 999,
        "email": "admin@shopng.com",
        "first_name": "Admin",
        "last_name": "User",
        "role": "admin",
        "status": "active",
        "registered_at": "2025-06-01T08:00:00+00:00",
        "order_count": 0,
        "total_spent": "0.00",
    },
    {
        "id": 998,
        "email": "user@shopng.com",
        "first_name": "Demo",
        "last_name": "User",
        "role": "user",
        "status": "active",
        "registered_at": "2025-09-15T12:30:00+00:00",
        "order_count": 2,
        "total_spent": "334.93",
    },
    {
        "id": 100,
        "email": "jane.smith@example.com",
        "first_name": "Jane",
        "last_name": "Smith",
        "role": "user",
        "status": "active",
        "registered_at": "2025-11-02T09:15:00+00:00",
        "order_count": 1,
        "total_spent": "221.48",
    },
    {
        "id": 101,
        "email": "mark.johnson@example.com",
        "first_name": "Mark",
        "last_name": "Johnson",
        "role": "user",
        "status": "active",
        "registered_at": "2025-12-10T17:45:00+00:00",
        "order_count": 1,
        "total_spent": "134.86",
    },
    {
        "id": 102,
        "email": "sarah.williams@example.com",
        "first_name": "Sarah",
        "last_name": "Williams",
        "role": "user",
        "status": "active",
        "registered_at": "2026-01-05T14:20:00+00:00",
        "order_count": 1,
        "total_spent": "242.97",
    },
]


def _line(product_id: int, quantity: int) -> dict:
    product = next(p for p in SEED_PRODUCTS if p["id"] == product_id)
    return {
        "product_id": product_id,
        "product_name": product["name"],
        "quantity": quantity,
        "unit_price": product["price"],
        "currency": "USD",
    }


SEED_ORDERS: list[dict] = [
    {
        "id": 1,
        "order_number": "ORD-10001",
        "email": "user@shopng.com",
        "first_name": "Demo",
        "last_name": "User",
        "status": "delivered",
        "total": "124.97",
        "created_at": "2025-10-01T10:12:00+00:00",
        "items": [_line(1, 1), _line(7, 1)],
    },
    {
        "id": 2,
        "order_number": "ORD-10002",
        "email": "jane.smith@example.com",
        "first_name": "Jane",
        "last_name": "Smith",
        "status": "shipped",
        "total": "221.48",
        "created_at": "2025-11-20T15:40:00+00:00",
        "items": [_line(4, 1), _line(5, 1)],
    },
    {
        "id": 3,
        "order_number": "ORD-10003",
        "email": "mark.johnson@example.com",
        "first_name": "Mark",
        "last_name": "Johnson",
        "status": "processing",
        "total": "134.86",
        "created_at": "2025-12-28T09:05:00+00:00",
        "items": [_line(3, 1), _line(11, 1), _line(12, 1)],
    },
    {
        "id": 4,
        "order_number": "ORD-10004",
        "email": "sarah.williams@example.com",
        "first_name": "Sarah",
        "last_name": "Williams",
        "status": "pending",
        "total": "242.97",
        "created_at": "2026-01-12T18:22:00+00:00",
        "items": [_line(6, 1), _line(10, 1), _line(7, 1)],
    },
    {
        "id": 5,
        "order_number": "ORD-10005",
        "email": "user@shopng.com",
        "first_name": "Demo",
        "last_name": "User",
        "status": "cancelled",
        "total": "209.96",
        "created_at": "2026-02-03T11:48:00+00:00",
        "items": [_line(2, 1)],
    },
]
