# marketing_site/cms/client.py
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import requests
from flask import current_app

from marketing_site.exceptions import CMSError, RevisionConflict


class SanityClient:
    """
    Minimal client for the Sanity HTTP API.

    Reads use the query endpoint with an explicit perspective:
    - published: public site
    - drafts: draft mode, always bypasses the CDN
    Writes go through the mutate endpoint as one transaction.
    """

    def __init__(
        self,
        *,
        project_id: str,
        dataset: str,
        api_version: str,
        token: Optional[str] = None,
        use_cdn: bool = False,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        if not project_id:
            raise CMSError("SANITY_PROJECT_ID is not configured")

        self.project_id = project_id
        self.dataset = dataset
        self.api_version = api_version.lstrip("v")
        self.token = token
        self.use_cdn = use_cdn
        self.timeout = timeout
        self.session = session or requests.Session()

    # -------------------------------------------------
    # URLs
    # -------------------------------------------------
    def _base_url(self, cdn: bool) -> str:
        host = "apicdn" if cdn else "api"
        return f"https://{self.project_id}.{host}.sanity.io/v{self.api_version}"

    def _headers(self, authenticated: bool) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if authenticated and self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, method: str, url: str, *, authenticated: bool, **kwargs) -> Dict[str, Any]:
        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(authenticated),
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            raise CMSError(f"Content service unreachable: {exc}") from exc

        if response.status_code == 409:
            raise RevisionConflict()

        if response.status_code >= 400:
            raise CMSError(
                f"Content service returned {response.status_code} for {method} {url}"
            )

        try:
            return response.json()
        except ValueError as exc:
            raise CMSError("Content service returned invalid JSON") from exc

    # -------------------------------------------------
    # Reads
    # -------------------------------------------------
    def fetch(self, query: str, params: Optional[Dict[str, Any]] = None, *, draft: bool = False) -> Any:
        request_params = {
            "query": query,
            "perspective": "drafts" if draft else "published",
        }
        for name, value in (params or {}).items():
            request_params[f"${name}"] = json.dumps(value)

        cdn = self.use_cdn and not draft
        url = f"{self._base_url(cdn)}/data/query/{self.dataset}"

        if draft and not self.token:
            current_app.logger.warning(
                "Draft mode requested but SANITY_API_TOKEN is not set; drafts may not load"
            )

        body = self._request("GET", url, authenticated=draft, params=request_params)
        return body.get("result")

    def get_document(self, document_id: str) -> Optional[Dict[str, Any]]:
        """Fetch the current revision of one document, bypassing the CDN."""
        url = f"{self._base_url(False)}/data/doc/{self.dataset}/{document_id}"
        body = self._request("GET", url, authenticated=True)
        documents = body.get("documents") or []
        return documents[0] if documents else None

    # -------------------------------------------------
    # Writes
    # -------------------------------------------------
    def mutate(self, mutations: List[Dict[str, Any]], *, return_documents: bool = False) -> Dict[str, Any]:
        if not self.token:
            raise CMSError("SANITY_API_TOKEN is required for mutations")

        url = f"{self._base_url(False)}/data/mutate/{self.dataset}"
        params = {
            "returnIds": "true",
            "returnDocuments": "true" if return_documents else "false",
            "visibility": "sync",
        }
        return self._request(
            "POST",
            url,
            authenticated=True,
            params=params,
            json={"mutations": mutations},
        )


def get_client() -> SanityClient:
    """Return the app-wide client, creating it on first use."""
    client = current_app.extensions.get("sanity")
    if client is None:
        config = current_app.config
        client = SanityClient(
            project_id=config.get("SANITY_PROJECT_ID"),
            dataset=config.get("SANITY_DATASET", "production"),
            api_version=config.get("SANITY_API_VERSION", "2024-01-01"),
            token=config.get("SANITY_API_TOKEN"),
            use_cdn=not current_app.debug,
            timeout=config.get("CMS_TIMEOUT", 10),
        )
        current_app.extensions["sanity"] = client
    return client
