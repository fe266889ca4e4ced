from __future__ import annotations


DEFAULT_TARGETS = [
    "https://www.paddleshop.co.uk/products/boden-standard-nx-6",
    "https://www.paddleshop.co.uk/products/aqua-marina-breeze-9-10",
    "https://www.vandsport.dk/produkt/boden-standard-nx-6",
    "https://www.vandsport.dk/produkt/red-paddle-co-ride-10-6",
]
