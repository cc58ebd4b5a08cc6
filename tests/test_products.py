import pytest

from marketing_site.cms import queries

PRESS = {
    "_id": "product-press",
    "_type": "product",
    "name": "Press 300",
    "slug": {"current": "press-300"},
    "shortDescription": "Hydraulic press brake",
    "fullDescription": [
        {"_type": "block", "style": "normal", "children": [{"_type": "span", "text": "Built in Brescia."}]}
    ],
    "category": {"_id": "cat-1", "name": "Presses", "slug": {"current": "presses"}},
    "specifications": [{"label": "Force", "value": "300 t"}, "not-a-spec"],
    "isNew": True,
    "relatedProducts": [None, {"name": "Press 200", "slug": {"current": "press-200"}}],
}


@pytest.fixture
def catalog(sanity):
    products = {"press-300": PRESS}
    sanity.results[queries.ALL_PRODUCTS_QUERY] = [
        PRESS,
        {"name": "Shear 12", "slug": {"current": "shear-12"}, "isFeatured": True},
    ]
    sanity.results[queries.ALL_CATEGORIES_QUERY] = [{"name": "Presses", "productCount": 1}]
    sanity.results[queries.PRODUCT_BY_SLUG_QUERY] = lambda params: products.get(params["slug"])
    sanity.results[queries.SITE_SETTINGS_QUERY] = {"companyName": "Officine Rossi"}
    return products


class TestProductList:
    def test_lists_active_products(self, client, sanity, catalog):
        response = client.get("/prodotti")
        html = response.get_data(as_text=True)

        assert response.status_code == 200
        assert 'href="/prodotti/press-300"' in html
        assert 'href="/prodotti/shear-12"' in html
        assert "Presses (1)" in html
        assert "Officine Rossi" in html
        assert all(draft is False for _, _, draft in sanity.fetches)

    def test_empty_catalog(self, client, sanity):
        html = client.get("/prodotti").get_data(as_text=True)
        assert "No products available" in html

    def test_cms_outage_still_renders(self, client, sanity):
        sanity.fail_reads = True
        assert client.get("/prodotti").status_code == 200

    def test_draft_mode_reads_drafts(self, editor_client, sanity, catalog):
        editor_client.get("/prodotti")
        assert all(draft is True for _, _, draft in sanity.fetches)


class TestProductDetail:
    def test_renders_product(self, client, catalog):
        response = client.get("/prodotti/press-300")
        html = response.get_data(as_text=True)

        assert response.status_code == 200
        assert "<h1>Press 300</h1>" in html
        assert "<dt>Force</dt>" in html
        assert "<dd>300 t</dd>" in html
        assert "<p>Built in Brescia.</p>" in html
        assert 'href="/prodotti/press-200"' in html

    def test_unknown_product(self, client, catalog):
        assert client.get("/prodotti/ghost").status_code == 404

    def test_cms_outage_is_not_found(self, client, sanity):
        sanity.fail_reads = True
        assert client.get("/prodotti/press-300").status_code == 404


class TestSitemap:
    def test_lists_pages_and_products(self, client, sanity):
        sanity.results[queries.PAGE_SLUGS_QUERY] = ["chi-siamo", "home", "contatti", "prodotti"]
        sanity.results[queries.PRODUCT_SLUGS_QUERY] = ["press-300"]

        response = client.get("/sitemap.xml")
        body = response.get_data(as_text=True)

        assert response.status_code == 200
        assert response.headers["Content-Type"].startswith("application/xml")
        assert [line.strip() for line in body.splitlines() if "<loc>" in line] == [
            "<url><loc>http://localhost/</loc></url>",
            "<url><loc>http://localhost/chi-siamo</loc></url>",
            "<url><loc>http://localhost/contatti</loc></url>",
            "<url><loc>http://localhost/prodotti</loc></url>",
            "<url><loc>http://localhost/prodotti/press-300</loc></url>",
        ]

    def test_cms_outage_keeps_static_paths(self, client, sanity):
        sanity.fail_reads = True
        body = client.get("/sitemap.xml").get_data(as_text=True)
        assert "<loc>http://localhost/</loc>" in body
        assert "<loc>http://localhost/prodotti</loc>" in body
