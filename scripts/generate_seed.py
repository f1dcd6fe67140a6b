"""Generate mock product rows for the product table."""

import csv
import random
from pathlib import Path

CATALOG = {
    "Computers": [("Dell", "Inspiron 15"), ("Apple", "MacBook Air"), ("Lenovo", "ThinkPad X1"), ("HP", "Spectre x360")],
    "TVs": [("Samsung", "QLED Q80"), ("LG", "OLED C3"), ("Sony", "Bravia XR")],
    "Phones": [("Apple", "iPhone X"), ("Google", "Pixel 2 XL"), ("Samsung", "Galaxy S9")],
    "Cameras": [("Canon", "EOS Rebel"), ("Nikon", "D3500"), ("Sony", "Alpha a6000")],
    "Smart Home Devices": [("Google", "Nest Hub"), ("Amazon", "Echo Dot"), ("Philips", "Hue Bridge")],
    "Video Games": [("Nintendo", "Switch"), ("Sony", "PlayStation 4"), ("Microsoft", "Xbox One S")],
}

rows = []
random.seed(42)
for idx in range(1, 101):
    category = random.choice(list(CATALOG))
    brand, product = random.choice(CATALOG[category])
    rows.append(
        {
            "id": idx,
            "product": product,
            "brand": brand,
            "category": category,
            "price": round(random.uniform(19, 2499), 2),
            "inStock": random.choice(["Yes", "No"]),
            "rating": round(random.uniform(1, 5), 1),
        }
    )

path = Path("data/products_seed.csv")
path.parent.mkdir(parents=True, exist_ok=True)
with path.open("w", newline="", encoding="utf-8") as file:
    writer = csv.DictWriter(file, fieldnames=list(rows[0].keys()))
    writer.writeheader()
    writer.writerows(rows)

print(f"Generated {len(rows)} rows -> {path}")
