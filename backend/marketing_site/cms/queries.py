# marketing_site/cms/queries.py
# GROQ queries. Section fields are passed through untouched.

SITE_SETTINGS_QUERY = """
*[_type == "siteSettings"][0] {
  "companyName": company.name,
  logo,
  tagline,
  contact,
  address,
  social,
  footer
}
"""

NAVIGATION_QUERY = """
*[_type == "navigation" && _id == "mainNavigation"][0] {
  header[] { _key, label, href, children[] { _key, label, href } },
  footer
}
"""

PAGE_BY_SLUG_QUERY = """
*[_type == "page" && slug.current == $slug][0] {
  _id,
  _type,
  _rev,
  _updatedAt,
  title,
  slug,
  description,
  seo,
  sections[] { _type, _key, ... }
}
"""

PAGE_SLUGS_QUERY = """
*[_type == "page" && defined(slug.current)].slug.current
"""

FEATURED_PRODUCTS_QUERY = """
*[_type == "product" && isActive == true && isFeatured == true] | order(order asc) [0...8] {
  _id,
  name,
  slug,
  shortDescription,
  "imageUrl": mainImage.asset->url,
  category->{ _id, name, slug },
  isNew
}
"""

ALL_TESTIMONIALS_QUERY = """
*[_type == "testimonial"] | order(order asc) {
  _id,
  author,
  role,
  company,
  quote,
  rating,
  "photoUrl": photo.asset->url
}
"""

PRODUCT_SLUGS_QUERY = """
*[_type == "product" && isActive == true && defined(slug.current)].slug.current
"""

ALL_PRODUCTS_QUERY = """
*[_type == "product" && isActive == true] | order(order asc) {
  _id,
  name,
  slug,
  shortDescription,
  "imageUrl": mainImage.asset->url,
  category->{ _id, name, slug },
  isNew,
  isFeatured
}
"""

PRODUCT_BY_SLUG_QUERY = """
*[_type == "product" && slug.current == $slug][0] {
  _id,
  _type,
  name,
  slug,
  shortDescription,
  fullDescription,
  "imageUrl": mainImage.asset->url,
  gallery,
  category->{ _id, name, slug },
  specifications,
  isNew,
  relatedProducts[]->{ _id, name, slug, shortDescription, "imageUrl": mainImage.asset->url },
  seo
}
"""

ALL_CATEGORIES_QUERY = """
*[_type == "productCategory" && isActive == true] | order(order asc) {
  _id,
  name,
  slug,
  description,
  "productCount": count(*[_type == "product" && isActive == true && references(^._id)])
}
"""
