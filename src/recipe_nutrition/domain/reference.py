"""Lab-tested nutrition values for first-party products.

Values come from the official product labels. They are injected into the
analysis prompt as ground truth so the models scale exact figures instead of
estimating them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LabelNutrients:
    """Nutrition panel values as printed on a product label."""

    energy_kj: float
    energy_kcal: float
    protein_g: float
    total_fat_g: float
    saturated_fat_g: float
    carbohydrates_g: float
    sugars_g: float
    dietary_fiber_g: float | None
    sodium_mg: float


@dataclass(frozen=True)
class ReferenceProduct:
    """First-party product with label nutrition per serve and per 100g."""

    product_id: str
    product_name: str
    aliases: tuple[str, ...]
    serving_size_g: float
    per_serving: LabelNutrients
    per_100g: LabelNutrients


REFERENCE_PRODUCTS: tuple[ReferenceProduct, ...] = (
    ReferenceProduct(
        product_id="BMS",
        product_name="Buttermilk Pancakes",
        aliases=(
            "buttermilk",
            "buttermilk pancake mix",
            "TPP buttermilk",
            "buttermilk waffle",
            "original pancakes",
        ),
        serving_size_g=40,
        per_serving=LabelNutrients(566, 135, 10.0, 0.6, 0.2, 21.9, 0.9, None, 445),
        per_100g=LabelNutrients(1415, 338, 25.1, 1.5, 0.4, 54.8, 2.3, None, 1114),
    ),
    ReferenceProduct(
        product_id="CCS",
        product_name="Cookies & Cream Pancakes",
        aliases=(
            "cookies and cream",
            "cookies & cream",
            "cookies cream pancake",
            "cookies cream waffle",
        ),
        serving_size_g=40,
        per_serving=LabelNutrients(583, 139, 10.0, 2.1, 0.6, 22.2, 4.5, None, 453),
        per_100g=LabelNutrients(1458, 348, 25.1, 5.3, 1.5, 55.6, 11.3, None, 1133),
    ),
    ReferenceProduct(
        product_id="CHS",
        product_name="Chocolate Pancakes",
        aliases=(
            "chocolate",
            "chocolate pancake mix",
            "choc pancake",
            "chocolate waffle",
        ),
        serving_size_g=40,
        per_serving=LabelNutrients(583, 139, 10.0, 0.8, 0.5, 23.0, 4.5, None, 419),
        per_100g=LabelNutrients(1458, 348, 25.1, 2.1, 1.3, 57.5, 11.3, None, 1048),
    ),
    ReferenceProduct(
        product_id="CIS",
        product_name="Cinnamon Churro Pancakes",
        aliases=(
            "cinnamon",
            "cinnamon churro",
            "churro pancake",
            "cinnamon waffle",
        ),
        serving_size_g=40,
        per_serving=LabelNutrients(575, 137, 10.5, 0.6, 0.3, 22.7, 5.2, None, 447),
        per_100g=LabelNutrients(1438, 343, 26.3, 1.6, 0.8, 56.8, 13.0, None, 1118),
    ),
    ReferenceProduct(
        product_id="GFBS",
        product_name="Gluten Free Buttermilk Pancakes",
        aliases=("gluten free buttermilk", "GF buttermilk", "gluten free pancake"),
        serving_size_g=40,
        per_serving=LabelNutrients(566, 135, 10.0, 0.6, 0.2, 21.9, 0.9, 1.7, 445),
        per_100g=LabelNutrients(1415, 338, 25.1, 1.5, 0.4, 54.8, 2.3, 4.3, 1114),
    ),
    ReferenceProduct(
        product_id="GFCIS",
        product_name="Gluten Free Cinnamon Churro Pancakes",
        aliases=("gluten free cinnamon", "GF cinnamon churro", "GF churro"),
        serving_size_g=40,
        per_serving=LabelNutrients(575, 137, 10.5, 0.6, 0.3, 22.8, 1.1, 1.5, 448),
        per_100g=LabelNutrients(1438, 343, 26.3, 1.6, 0.8, 57.0, 2.8, 3.7, 1119),
    ),
    ReferenceProduct(
        product_id="MAS",
        product_name="Maple Pancakes",
        aliases=("maple", "maple pancake mix", "maple waffle"),
        serving_size_g=40,
        per_serving=LabelNutrients(575, 137, 10.0, 0.6, 0.3, 23.4, 5.2, None, 437),
        per_100g=LabelNutrients(1438, 343, 25.1, 1.6, 0.8, 58.6, 13.0, None, 1093),
    ),
    ReferenceProduct(
        product_id="SCS",
        product_name="Salted Caramel Pancakes",
        aliases=(
            "salted caramel",
            "salted caramel pancake",
            "salted caramel waffle",
        ),
        serving_size_g=40,
        per_serving=LabelNutrients(575, 137, 10.5, 0.5, 0.2, 22.5, 5.6, None, 420),
        per_100g=LabelNutrients(1438, 343, 26.3, 1.3, 0.6, 56.3, 14.0, None, 1050),
    ),
    ReferenceProduct(
        product_id="SFMS",
        product_name="Sugar Free Maple Flavoured Syrup",
        aliases=(
            "TPP syrup",
            "sugar free syrup",
            "maple syrup TPP",
            "protein pancake syrup",
        ),
        # 37ml serve
        serving_size_g=37,
        per_serving=LabelNutrients(441, 105, 0, 0, 0, 0.5, 0, 0.5, 7),
        per_100g=LabelNutrients(1190, 284, 0, 0, 0, 1.0, 0, 1.0, 18),
    ),
)


def format_reference_context(
    products: tuple[ReferenceProduct, ...] = REFERENCE_PRODUCTS,
) -> str:
    """Format the product table as a ground-truth block for prompts."""
    blocks = "\n".join(_format_product(product) for product in products)
    return (
        "IMPORTANT: The Protein Pancake (TPP) Official Product Nutritional Data:\n"
        "These are EXACT lab-tested values from product labels. When a recipe "
        "uses any TPP product,\n"
        "you MUST use these exact values (scaled by the amount used) rather "
        "than estimating.\n"
        f"\n{blocks}\n\n"
        "All TPP pancake/waffle mixes: 320g packet, 8 serves of 40g. "
        "High-protein (~25g per 100g).\n"
        "Mix typically requires adding water/milk and cooking."
    )


def _format_product(product: ReferenceProduct) -> str:
    serve = product.per_serving
    per_100g = product.per_100g
    aliases = ", ".join(product.aliases)
    return (
        f"\n{product.product_name} ({product.product_id}):\n"
        f"  Also known as: {aliases}\n"
        f"  Serving: {_fmt(product.serving_size_g)}g\n"
        f"  Per serve: {_fmt(serve.energy_kcal)} kcal | "
        f"Protein {_fmt(serve.protein_g)}g | "
        f"Fat {_fmt(serve.total_fat_g)}g (Sat {_fmt(serve.saturated_fat_g)}g) | "
        f"Carbs {_fmt(serve.carbohydrates_g)}g (Sugars {_fmt(serve.sugars_g)}g) | "
        f"Fiber {_fmt(serve.dietary_fiber_g)}g | "
        f"Sodium {_fmt(serve.sodium_mg)}mg\n"
        f"  Per 100g: {_fmt(per_100g.energy_kcal)} kcal | "
        f"Protein {_fmt(per_100g.protein_g)}g | "
        f"Fat {_fmt(per_100g.total_fat_g)}g | "
        f"Carbs {_fmt(per_100g.carbohydrates_g)}g | "
        f"Sodium {_fmt(per_100g.sodium_mg)}mg"
    )


def _fmt(value: float | None) -> str:
    """Render a label value the way it is printed, with `—` for unknown."""
    if value is None:
        return "—"
    if float(value).is_integer():
        return str(int(value))
    return str(value)
