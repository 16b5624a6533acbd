# codediff/core/samples.py
"""Example original/modified pairs offered by the "Load example" actions."""
from __future__ import annotations

from typing import Dict, Tuple

_JAVA_ORIGINAL = """public class Hello {
    public static void main(String[] args) {
        System.out.println("Hello, World!");
        int x = 5;
        int y = 10;
        int sum = x + y;
        System.out.println("Sum: " + sum);
    }
}"""

_JAVA_MODIFIED = """public class Hello {
    public static void main(String[] args) {
        System.out.println("Hello, Java World!");
        int x = 10;  // Changed value
        int y = 20;  // Changed value
        int sum = x + y;
        int product = x * y;  // Added line
        System.out.println("Sum: " + sum);
        System.out.println("Product: " + product);  // Added line
    }
}"""

_HTML_ORIGINAL = """<!DOCTYPE html>
<html>
<head>
    <title>My Webpage</title>
    <meta charset="UTF-8">
</head>
<body>
    <h1>Welcome to my site</h1>
    <p>This is a paragraph.</p>
    <ul>
        <li>Item 1</li>
        <li>Item 2</li>
    </ul>
</body>
</html>"""

_HTML_MODIFIED = """<!DOCTYPE html>
<html>
<head>
    <title>My New Webpage</title>
    <meta charset="UTF-8">
    <link rel="stylesheet" href="styles.css">
</head>
<body>
    <header>
        <h1>Welcome to my updated site</h1>
    </header>
    <p>This is a modified paragraph.</p>
    <ul>
        <li>Item 1</li>
        <li>Item 2</li>
        <li>Item 3</li>
    </ul>
    <footer>Copyright 2025</footer>
</body>
</html>"""

_JS_ORIGINAL = """function calculateTotal(items) {
  let total = 0;
  for (let i = 0; i < items.length; i++) {
    total += items[i].price;
  }
  return total;
}

const items = [
  { name: 'Book', price: 10 },
  { name: 'Pen', price: 2 },
  { name: 'Notebook', price: 5 }
];

console.log('Total: $' + calculateTotal(items));"""

_JS_MODIFIED = """function calculateTotal(items, discount = 0) {
  let total = 0;

  // Use forEach instead of for loop
  items.forEach(item => {
    total += item.price;
  });

  // Apply discount
  if (discount > 0) {
    total -= (total * discount);
  }

  return total;
}

const items = [
  { name: 'Book', price: 10 },
  { name: 'Pen', price: 2 },
  { name: 'Notebook', price: 5 },
  { name: 'Marker', price: 3 }
];

// Apply 10% discount
console.log('Total: $' + calculateTotal(items, 0.1));"""

_CSS_ORIGINAL = """.container {
  width: 800px;
  margin: 0 auto;
  padding: 20px;
  background-color: #f0f0f0;
}

.header {
  color: #333;
  font-size: 24px;
  margin-bottom: 15px;
}

.content {
  line-height: 1.5;
  color: #666;
}"""

_CSS_MODIFIED = """.container {
  width: 100%;
  max-width: 1200px;
  margin: 0 auto;
  padding: 30px;
  background-color: #ffffff;
  box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
}

.header {
  color: #222;
  font-size: 28px;
  margin-bottom: 20px;
  font-weight: bold;
}

.content {
  line-height: 1.6;
  color: #444;
  font-size: 16px;
}

.footer {
  margin-top: 20px;
  border-top: 1px solid #eee;
  padding-top: 15px;
  color: #888;
}"""

SAMPLES: Dict[str, Tuple[str, str]] = {
    "java": (_JAVA_ORIGINAL, _JAVA_MODIFIED),
    "html": (_HTML_ORIGINAL, _HTML_MODIFIED),
    "javascript": (_JS_ORIGINAL, _JS_MODIFIED),
    "css": (_CSS_ORIGINAL, _CSS_MODIFIED),
}


def get_sample(name: str) -> Tuple[str, str]:
    key = (name or "").strip().lower()
    if key not in SAMPLES:
        raise KeyError(f"Unknown sample '{name}'. Available: {', '.join(sorted(SAMPLES))}")
    return SAMPLES[key]
