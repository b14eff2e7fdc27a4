"""
Built-in issue metadata per export format.
"""

from typing import Dict

from .issue import IssueMeta


def _meta(
    title: str,
    category: str,
    blocking: bool,
    auto_fixable: bool,
    explanation: str = "",
    why_platform_cares: str = "",
    how_to_fix: str = "",
) -> IssueMeta:
    return IssueMeta(
        title=title,
        blocking=blocking,
        auto_fixable=auto_fixable,
        category=category,
        explanation=explanation,
        why_platform_cares=why_platform_cares,
        how_to_fix=how_to_fix,
    )


SHOPIFY_ISSUE_META: Dict[str, IssueMeta] = {
    "shopify/missing_required_header": _meta(
        "Missing required column", "required", True, False,
        explanation="A required Shopify column is missing from the CSV.",
        why_platform_cares="Shopify requires certain columns to correctly create or update products and variants.",
        how_to_fix="Add the missing column(s). Download the Shopify sample CSV for the correct header list.",
    ),
    "shopify/blank_title": _meta(
        "Missing Title", "required", True, False,
        explanation="A product row is missing a Title.",
        why_platform_cares="Shopify needs a product title to create a product (Title can be blank only for image-only rows).",
        how_to_fix="Fill Title with the product name.",
    ),
    "shopify/blank_handle": _meta(
        "Missing URL handle", "handle", True, True,
        explanation="A row is missing a URL handle.",
        why_platform_cares="Shopify groups variant rows by URL handle. Missing handles can break grouping and updates.",
        how_to_fix="Fill URL handle using lowercase letters, numbers, and hyphens (no spaces).",
    ),
    "shopify/invalid_handle": _meta(
        "Invalid URL handle", "handle", True, True,
        explanation="The URL handle contains invalid characters.",
        why_platform_cares="Invalid handles can cause Shopify import errors and broken product URLs.",
        how_to_fix="Use lowercase letters, numbers, and hyphens only (no spaces or special characters).",
    ),
    "shopify/invalid_boolean_published": _meta(
        "Invalid Published value", "publishing", True, True,
        explanation="Published on online store has a non-boolean value.",
        why_platform_cares="Shopify expects TRUE or FALSE (or blank). Invalid values can block import.",
        how_to_fix="Use TRUE, FALSE, or leave blank.",
    ),
    "shopify/invalid_boolean_continue_selling": _meta(
        "Invalid Continue selling value", "inventory", True, False,
        explanation="Continue selling when out of stock has a non-boolean value.",
        why_platform_cares="Shopify expects DENY or CONTINUE (or boolean in some contexts). Invalid values can block import.",
        how_to_fix='Use "DENY" or "CONTINUE" (recommended), or TRUE/FALSE if your export uses that style.',
    ),
    "shopify/invalid_numeric_price": _meta(
        "Invalid Price", "pricing", True, False,
        explanation="Price is not a valid number.",
        why_platform_cares="Shopify requires numeric values for pricing fields.",
        how_to_fix="Use a number like 19.99.",
    ),
    "shopify/invalid_numeric_compare_at": _meta(
        "Invalid Compare-at price", "pricing", True, False,
        explanation="Compare-at price is not a valid number.",
        why_platform_cares="Shopify requires numeric values for pricing fields.",
        how_to_fix="Use a number like 24.99 or leave blank.",
    ),
    "shopify/compare_at_lt_price": _meta(
        "Compare-at price lower than Price", "pricing", False, False,
        explanation="Compare-at price is lower than Price.",
        why_platform_cares="Compare-at price is meant to represent an original higher price (for sales).",
        how_to_fix="Ensure Compare-at price is greater than or equal to Price, or leave it blank.",
    ),
    "shopify/invalid_integer_inventory_qty": _meta(
        "Invalid Inventory quantity", "inventory", True, False,
        explanation="Inventory quantity is not a valid integer.",
        why_platform_cares="Inventory quantities must be whole numbers.",
        how_to_fix="Use an integer like 0, 5, 100.",
    ),
    "shopify/negative_inventory": _meta(
        "Negative inventory", "inventory", False, False,
        explanation="Inventory quantity is negative.",
        why_platform_cares="Negative inventory is usually a data error and can create fulfillment issues.",
        how_to_fix="Use 0 or a positive quantity, or configure backorders using Continue selling settings.",
    ),
    "shopify/invalid_image_url": _meta(
        "Invalid image URL", "images", False, False,
        explanation="Product image URL is not a valid http(s) URL.",
        why_platform_cares="Shopify must be able to fetch images via a valid URL.",
        how_to_fix="Use a full http(s) URL to a publicly accessible image.",
    ),
    "shopify/invalid_image_position": _meta(
        "Invalid image position", "images", False, False,
        explanation="Image position is not a valid integer.",
        why_platform_cares="Image position controls ordering; invalid values can cause unpredictable ordering.",
        how_to_fix="Use 1, 2, 3... or leave blank.",
    ),
    "shopify/option_order_invalid": _meta(
        "Option columns out of order", "variant", True, False,
        explanation="Option2/Option3 has values while Option1 is blank.",
        why_platform_cares="Shopify expects options to be filled sequentially (Option1, then Option2, then Option3).",
        how_to_fix="Fill Option1 before using Option2, and fill Option2 before Option3.",
    ),
    "shopify/missing_option1_for_variant_data": _meta(
        "Missing Option1 for variant data", "variant", True, False,
        explanation="Variant data exists on a row but Option1 name/value are missing.",
        why_platform_cares="Shopify can mis-handle variants if option columns are missing when variant fields are present.",
        how_to_fix="Include Option1 name and Option1 value on variant rows.",
    ),
    "shopify/options_not_unique": _meta(
        "Variant options not unique", "variant", True, False,
        explanation="Two or more variants for the same product have identical option values.",
        why_platform_cares="Shopify requires each variant option combination to be unique.",
        how_to_fix="Make each variant option combination unique (Option1/2/3 values).",
    ),
    "shopify/blank_price": _meta(
        "Missing Price", "pricing", True, False,
        explanation="A variant row is missing a Price.",
        why_platform_cares="Shopify requires a price for variants when creating products.",
        how_to_fix="Fill Price with a number like 19.99.",
    ),
    "shopify/duplicate_sku": _meta(
        "Duplicate SKU", "variant", False, False,
        explanation="The same SKU appears on multiple rows.",
        why_platform_cares="Many inventory and fulfillment workflows expect unique SKUs per variant.",
        how_to_fix="Make SKUs unique per variant (or leave blank if you don’t use SKUs).",
    ),
    "shopify/duplicate_sku_across_products": _meta(
        "Duplicate SKU across products", "variant", False, False,
        explanation="The same SKU appears under different URL handles (different products).",
        why_platform_cares="Reusing SKUs across products can cause confusion in inventory systems, shipping tools, and analytics.",
        how_to_fix="Make SKUs unique across your catalog, or confirm you truly intend to share SKUs across multiple products.",
    ),
    "shopify/handle_title_mismatch": _meta(
        "Same URL handle with different Titles", "handle", False, False,
        explanation="Multiple different Titles are used for rows sharing the same URL handle.",
        why_platform_cares="Shopify groups rows by URL handle. Conflicting titles can cause unexpected overwrites or confusing imports.",
        how_to_fix="Use a single consistent Title for all rows under the same URL handle (variants and image rows).",
    ),
    "shopify/image_alt_text_too_long": _meta(
        "Image alt text too long", "images", False, False,
        explanation="Image alt text exceeds Shopify's recommended limit.",
        why_platform_cares="Overly long alt text may be truncated or cause formatting issues.",
        how_to_fix="Shorten alt text to 512 characters or fewer.",
    ),
    "shopify/option_name_inconsistent": _meta(
        "Option names differ across variants", "variant", False, False,
        explanation="Option1/Option2/Option3 names should be consistent across all rows that share a handle.",
        why_platform_cares="Inconsistent option names can cause variants to import incorrectly or appear mis-grouped.",
        how_to_fix="Use the same Option1/Option2/Option3 names for every variant row under the same handle.",
    ),
    "shopify/mixed_default_title_with_options": _meta(
        'Mixed "Default Title" with real options', "variant", False, False,
        explanation='A handle includes both "Default Title" rows and option-based variant rows.',
        why_platform_cares="This usually indicates accidental mixing of single-variant and multi-variant product structures.",
        how_to_fix='Use "Default Title" only when the product has a single variant. For multi-variant products, use real option values (Size/Color/etc) on every variant row.',
    ),
    "shopify/image_row_has_variant_fields": _meta(
        "Image row contains variant fields", "images", False, False,
        explanation="A row looks like an image-only row, but it contains variant fields like SKU/Price/Options/Inventory.",
        why_platform_cares="This can break variant grouping and cause confusing imports.",
        how_to_fix="For extra image rows, keep only URL handle + image fields. Move variant fields to the main product/variant rows.",
    ),
    "shopify/duplicate_image_position": _meta(
        "Duplicate image position", "images", False, False,
        explanation="Two or more rows share the same Image position for the same handle.",
        why_platform_cares="Image position controls ordering; duplicates can lead to unpredictable ordering.",
        how_to_fix="Use unique Image position values per handle (1, 2, 3...).",
    ),
    "shopify/seo_title_too_long": _meta(
        "SEO title too long", "seo", False, False,
        explanation="SEO title exceeds recommended length.",
        why_platform_cares="Long titles may be truncated in search results.",
        how_to_fix="Shorten SEO title to 70 characters or fewer.",
    ),
    "shopify/seo_description_too_long": _meta(
        "SEO description too long", "seo", False, False,
        explanation="SEO description exceeds recommended length.",
        why_platform_cares="Long descriptions may be truncated in search snippets.",
        how_to_fix="Shorten SEO description to 320 characters or fewer.",
    ),
    "shopify/seo_title_missing": _meta(
        "SEO title missing", "seo", False, False,
        explanation="SEO title is blank (Shopify will fall back to Title).",
        why_platform_cares="Custom SEO titles can improve click-through rate.",
        how_to_fix="Optional: provide a custom SEO title.",
    ),
    "shopify/seo_description_missing": _meta(
        "SEO description missing", "seo", False, False,
        explanation="SEO description is blank (Shopify may auto-generate one).",
        why_platform_cares="Custom descriptions can improve click-through rate and clarity in search results.",
        how_to_fix="Optional: provide a custom SEO description.",
    ),
}

WOOCOMMERCE_ISSUE_META: Dict[str, IssueMeta] = {
    "woocommerce/missing_required_header": _meta(
        "Missing required column", "structure", True, False,
        explanation="One or more required WooCommerce import columns are missing from the header row.",
        why_platform_cares="WooCommerce relies on specific column names to map fields during import.",
        how_to_fix="Export a fresh WooCommerce sample CSV and ensure all required columns are present and spelled exactly.",
    ),
    "woocommerce/unknown_header": _meta(
        "Unknown column", "structure", False, False,
        explanation="This column is not recognized by the WooCommerce importer.",
        why_platform_cares="Unknown columns are ignored and can hide data issues.",
        how_to_fix="Remove the column or rename it to a supported WooCommerce import header.",
    ),
    "woocommerce/missing_type": _meta(
        "Missing product type", "structure", True, False,
        explanation="The Type column is required and determines how the row is interpreted.",
        why_platform_cares="WooCommerce uses Type to decide whether a row is a product, variation, or parent grouping.",
        how_to_fix="Set Type to simple, variable, variation, grouped, or external for each row.",
    ),
    "woocommerce/invalid_type": _meta(
        "Invalid product type", "structure", True, False,
        explanation="The Type value is not one of WooCommerce's supported types.",
        why_platform_cares="Invalid types can cause rows to import incorrectly or be rejected.",
        how_to_fix="Use one of: simple, variable, variation, grouped, external.",
    ),
    "woocommerce/missing_name": _meta(
        "Missing product name", "compliance", True, False,
        explanation="Non-variation product rows should have a Name.",
        why_platform_cares="Products without names are not usable in the storefront.",
        how_to_fix="Provide a Name for all non-variation rows.",
    ),
    "woocommerce/variation_missing_parent": _meta(
        "Variation missing parent linkage", "variant", True, True,
        explanation="Variation rows must link to a parent variable product using the Parent field.",
        why_platform_cares="Orphaned variations cannot be imported correctly.",
        how_to_fix="Set Parent to the parent product's ID (or enable auto-create parents in the Variable import preset).",
    ),
    "woocommerce/variation_missing_attributes": _meta(
        "Variation missing attributes", "attributes", True, False,
        explanation="Variation rows need attribute name/value pairs to form a valid variation combination.",
        why_platform_cares="Without attributes, WooCommerce cannot build a distinct variation.",
        how_to_fix="Fill Attribute name and Attribute value for variation rows.",
    ),
    "woocommerce/duplicate_variation_combo": _meta(
        "Duplicate variation combination", "variant", False, False,
        explanation="Two or more variations under the same parent share the same attribute combination.",
        why_platform_cares="Duplicate combinations can overwrite each other or cause unexpected merges.",
        how_to_fix="Ensure each variation has a unique attribute value combination under its parent.",
    ),
    "woocommerce/missing_sku": _meta(
        "Missing SKU", "sku", False, False,
        explanation="A missing SKU reduces update reliability and can break inventory tracking.",
        why_platform_cares="SKUs are used for matching, updates, and integrations.",
        how_to_fix="Provide a unique SKU for each product/variation where possible.",
    ),
    "woocommerce/duplicate_sku": _meta(
        "Duplicate SKU risk", "sku", False, False,
        explanation="Two or more rows share the same SKU.",
        why_platform_cares="During import, duplicate SKUs can overwrite existing products or attach data to the wrong item.",
        how_to_fix="Make SKUs unique. If you need duplicates intentionally, split catalogs or use a consistent parent/child strategy.",
    ),
    "woocommerce/invalid_regular_price": _meta(
        "Invalid regular price", "pricing", True, False,
        explanation="Regular price must be a valid number.",
        why_platform_cares="Invalid price values cause import failures or incorrect storefront pricing.",
        how_to_fix="Use numeric values like 19.99 (no currency symbols).",
    ),
    "woocommerce/invalid_sale_price": _meta(
        "Invalid sale price", "pricing", False, False,
        explanation="Sale price must be a valid number.",
        why_platform_cares="Invalid sale price may be ignored or cause pricing issues.",
        how_to_fix="Use numeric values like 14.99 (no currency symbols).",
    ),
    "woocommerce/missing_image": _meta(
        "Missing image", "media", False, False,
        explanation="This product row has no image URL.",
        why_platform_cares="Imports can succeed without images, but missing images reduce listing quality and conversions.",
        how_to_fix="Provide an Images URL (or multiple URLs separated by commas) for products.",
    ),
}

ETSY_ISSUE_META: Dict[str, IssueMeta] = {
    "etsy/missing_required_header": _meta(
        "Missing required column", "structure", True, False,
        explanation="One or more required Etsy bulk listing columns are missing.",
        why_platform_cares="Etsy's importer needs exact headers to map listing fields correctly.",
        how_to_fix="Export a fresh Etsy bulk listing CSV and ensure required headers are present and unchanged.",
    ),
    "etsy/invalid_price": _meta(
        "Invalid price", "pricing", True, False,
        explanation="Price must be a valid number.",
        why_platform_cares="Invalid prices can cause listing rejection.",
        how_to_fix="Use numeric values like 19.99 (no currency symbols).",
    ),
    "etsy/title_too_long": _meta(
        "Title too long", "compliance", False, True,
        explanation="Etsy titles have a maximum length.",
        why_platform_cares="Overlong titles may be truncated or rejected depending on the importer.",
        how_to_fix="Shorten the title (we can safely trim to the maximum length).",
    ),
    "etsy/tags_too_many": _meta(
        "Too many tags", "tags", False, True,
        explanation="Etsy listings support up to 13 tags.",
        why_platform_cares="Over-limit tags are ignored and reduce search optimization.",
        how_to_fix="Keep the best 13 tags (we can automatically limit to 13).",
    ),
    "etsy/too_many_tags": _meta(
        "Too many tags", "tags", False, True,
        explanation="Etsy listings support up to 13 tags.",
        why_platform_cares="Over-limit tags are ignored and reduce search optimization.",
        how_to_fix="Keep the best 13 tags (we can automatically limit to 13).",
    ),
    "etsy/tag_too_long": _meta(
        "Tag exceeds 20 characters", "tags", False, False,
        explanation="Etsy limits each tag to a maximum of 20 characters.",
        why_platform_cares="Tags exceeding 20 characters are rejected by Etsy's tag input.",
        how_to_fix="Shorten the offending tags to 20 characters or fewer.",
    ),
    "etsy/missing_title": _meta(
        "Missing listing title", "compliance", True, False,
        explanation="A listing title is required for all Etsy listings.",
        why_platform_cares="Listings without a title cannot be published or imported.",
        how_to_fix="Provide a descriptive title (up to 140 characters).",
    ),
    "etsy/missing_price": _meta(
        "Missing price", "pricing", True, False,
        explanation="A price is required for all Etsy listings.",
        why_platform_cares="Listings without a price cannot be published.",
        how_to_fix="Provide a listing price as a plain decimal (e.g., 19.99).",
    ),
    "etsy/invalid_quantity": _meta(
        "Invalid quantity", "inventory", True, False,
        explanation="Quantity must be a non-negative whole number.",
        why_platform_cares="Invalid quantity values cause listing import or publish failures.",
        how_to_fix="Use a whole number like 0, 1, or 10.",
    ),
    "etsy/invalid_currency": _meta(
        "Invalid currency code", "compliance", False, True,
        explanation="Currency must be a valid 3-letter ISO 4217 code (e.g., USD, GBP, EUR).",
        why_platform_cares="An invalid currency code may cause listing import failures or incorrect price display.",
        how_to_fix="Use a standard 3-letter currency code (we can auto-uppercase the value).",
    ),
    "etsy/invalid_image_url": _meta(
        "Invalid image URL", "media", False, False,
        explanation="One or more image URLs are not valid http(s) URLs.",
        why_platform_cares="Etsy cannot fetch images from invalid URLs, resulting in listings with no photos.",
        how_to_fix="Use full https:// URLs pointing to publicly accessible images, separated by commas.",
    ),
    "etsy/duplicate_tags": _meta(
        "Duplicate tags", "tags", False, True,
        explanation="Duplicate tags waste limited tag slots.",
        why_platform_cares="Tag duplication reduces discoverability.",
        how_to_fix="Remove duplicates (we can automatically deduplicate while preserving order).",
    ),
    "etsy/missing_shipping_profile": _meta(
        "Missing shipping profile", "shipping", True, False,
        explanation="Shipping profile (or equivalent shipping fields) is required to publish.",
        why_platform_cares="Listings without shipping configuration cannot be published.",
        how_to_fix="Provide a valid shipping profile id/name or the required shipping fields used by your export.",
    ),
    "etsy/duplicate_listing_id": _meta(
        "Duplicate listing id risk", "compliance", False, False,
        explanation="Two or more rows share the same Listing ID.",
        why_platform_cares="Duplicate IDs can overwrite existing listings instead of creating new ones.",
        how_to_fix="Ensure Listing ID is unique when creating new listings, or intentionally set it when updating existing listings.",
    ),
    "etsy/duplicate_sku": _meta(
        "Duplicate SKU risk", "sku", False, False,
        explanation="Two or more listings share the same SKU.",
        why_platform_cares="Duplicate SKUs can create confusion for inventory and integrations.",
        how_to_fix="Make SKUs unique where possible.",
    ),
    "etsy/missing_required_field": _meta(
        "Missing required field", "compliance", True, False,
        explanation="A required Etsy field is missing.",
        why_platform_cares="Missing required fields cause listing rejection.",
        how_to_fix="Fill the missing required field as indicated by the issue details.",
    ),
    "etsy/unknown_header": _meta(
        "Unknown column", "structure", False, False,
        explanation="This column is not recognized by the Etsy importer.",
        why_platform_cares="Unknown columns are ignored and can hide data issues.",
        how_to_fix="Remove the column or rename it to a supported Etsy header.",
    ),
}

# Keyed by preset format id.
FORMAT_ISSUE_META: Dict[str, Dict[str, IssueMeta]] = {
    "shopify_products": SHOPIFY_ISSUE_META,
    "woocommerce_products": WOOCOMMERCE_ISSUE_META,
    "woocommerce_variable_products": WOOCOMMERCE_ISSUE_META,
    "etsy_listings": ETSY_ISSUE_META,
}

# Codes emitted by simple formats look like "<formatId>/<suffix>".
GENERIC_ISSUE_META: Dict[str, IssueMeta] = {
    "missing_required_column": _meta(
        "Missing required column", "structure", True, False,
        explanation="Your CSV is missing a required header column for this platform’s import template.",
        why_platform_cares="Imports fail or drop data when required headers are missing.",
        how_to_fix="Add the missing column header to your CSV and re-upload. If you exported from another system, map its fields to this template.",
    ),
    "required_blank": _meta(
        "Required field is blank", "structure", True, False,
        explanation="A required field is empty in one or more rows.",
        why_platform_cares="Platforms reject rows that are missing required values.",
        how_to_fix="Fill in the missing value in the highlighted row(s), then export again.",
    ),
    "invalid_email": _meta(
        "Invalid email format", "structure", False, False,
        explanation="This email doesn’t look like a valid email address.",
        why_platform_cares="Email-based imports require valid addresses to match or contact users.",
        how_to_fix="Correct typos and ensure the value looks like name@domain.com.",
    ),
    "invalid_number": _meta(
        "Invalid numeric value", "pricing", False, False,
        explanation="This field is expected to be numeric, but the value can’t be parsed as a number.",
        why_platform_cares="Imports may reject rows or store incorrect values when numeric fields are invalid.",
        how_to_fix="Remove currency symbols/commas and use plain numbers (e.g., 19.99).",
    ),
}
