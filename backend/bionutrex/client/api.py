"""
HTTP client for the BioNutrex CMS API.

Mirrors the calls the admin panel and the public site make. The base URL
comes from ``BIONUTREX_API_URL`` when not given explicitly.
"""
import json
import logging
import os
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3001/api"
DEFAULT_TIMEOUT = 15


class CMSAPIError(Exception):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _form_value(value):
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return "" if value is None else str(value)


class CMSClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = (base_url or os.getenv("BIONUTREX_API_URL") or DEFAULT_API_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.token = token

    # ------------------------
    # Transport
    # ------------------------

    def _headers(self) -> Dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        response = self.session.request(
            method,
            url,
            headers=self._headers(),
            timeout=self.timeout,
            **kwargs,
        )

        if not response.ok:
            try:
                message = response.json().get("error") or response.reason
            except ValueError:
                message = response.reason
            raise CMSAPIError(response.status_code, message)

        if not response.content:
            return None
        return response.json()

    def _send(self, method: str, path: str, data: Dict[str, Any], image=None) -> Any:
        """
        JSON body, or multipart when an image file object is attached.

        Multipart values are strings; lists and dicts travel as JSON text.
        """
        if image is None:
            return self._request(method, path, json=data)

        form = {key: _form_value(value) for key, value in data.items()}
        return self._request(method, path, data=form, files={"image": image})

    # ------------------------
    # Auth
    # ------------------------

    def login(self, email: str, password: str) -> Dict[str, Any]:
        result = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = result["token"]
        return result

    def register(self, email: str, password: str, name: str) -> Dict[str, Any]:
        return self._request(
            "POST",
            "/auth/register",
            json={"email": email, "password": password, "name": name},
        )

    def verify(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/verify")

    def logout(self) -> None:
        self.token = None

    # ------------------------
    # Sliders
    # ------------------------

    def list_sliders(self, admin: bool = False) -> List[Dict[str, Any]]:
        return self._request("GET", "/sliders/admin/all" if admin else "/sliders")

    def get_slider(self, slider_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/sliders/{slider_id}")

    def create_slider(self, data: Dict[str, Any], image=None) -> Dict[str, Any]:
        return self._send("POST", "/sliders", data, image)

    def update_slider(self, slider_id: str, data: Dict[str, Any], image=None) -> Dict[str, Any]:
        return self._send("PUT", f"/sliders/{slider_id}", data, image)

    def delete_slider(self, slider_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/sliders/{slider_id}")

    # ------------------------
    # Home sections
    # ------------------------

    def list_home_sections(self, admin: bool = False) -> List[Dict[str, Any]]:
        """
        With ``admin=True`` a failing admin listing falls back to the public
        one, which only carries active sections.
        """
        if not admin:
            return self._request("GET", "/home-sections")

        try:
            return self._request("GET", "/home-sections/admin/all")
        except (CMSAPIError, requests.RequestException) as exc:
            logger.warning("Admin sections endpoint failed (%s), using public endpoint", exc)
            return self._request("GET", "/home-sections")

    def get_home_section_by_key(self, section_key: str) -> Dict[str, Any]:
        return self._request("GET", f"/home-sections/key/{section_key}")

    def create_home_section(self, data: Dict[str, Any], image=None) -> Dict[str, Any]:
        return self._send("POST", "/home-sections", data, image)

    def update_home_section(self, section_id: str, data: Dict[str, Any], image=None) -> Dict[str, Any]:
        return self._send("PUT", f"/home-sections/{section_id}", data, image)

    def delete_home_section(self, section_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/home-sections/{section_id}")

    # ------------------------
    # Blog posts
    # ------------------------

    def list_blog_posts(self, admin: bool = False) -> List[Dict[str, Any]]:
        return self._request("GET", "/blog-posts/admin/all" if admin else "/blog-posts")

    def get_blog_post_by_slug(self, slug: str) -> Dict[str, Any]:
        return self._request("GET", f"/blog-posts/slug/{slug}")

    def create_blog_post(self, data: Dict[str, Any], image=None) -> Dict[str, Any]:
        return self._send("POST", "/blog-posts", data, image)

    def update_blog_post(self, post_id: str, data: Dict[str, Any], image=None) -> Dict[str, Any]:
        return self._send("PUT", f"/blog-posts/{post_id}", data, image)

    def delete_blog_post(self, post_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/blog-posts/{post_id}")

    # ------------------------
    # Uploads
    # ------------------------

    def upload(self, file) -> Dict[str, Any]:
        return self._request("POST", "/uploads", files={"file": file})

    def upload_many(self, files) -> List[Dict[str, Any]]:
        result = self._request("POST", "/uploads/multiple", files=[("files", f) for f in files])
        return result["files"]

    def list_uploads(self) -> List[str]:
        return self._request("GET", "/uploads/list")
