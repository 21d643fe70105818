"""Vocabulary List API client.

This module defines a small client wrapper around the REST API served
by :mod:`vocabulary_api`.  It uses the ``requests`` library and exposes
one method per service operation:

* :meth:`VocabularyAPI.create_list`, :meth:`~VocabularyAPI.update_list`,
  :meth:`~VocabularyAPI.get_list`, :meth:`~VocabularyAPI.delete_list`,
  :meth:`~VocabularyAPI.list_lists`, :meth:`~VocabularyAPI.count_words`
* :meth:`VocabularyAPI.add_word`, :meth:`~VocabularyAPI.update_word`,
  :meth:`~VocabularyAPI.delete_word`, :meth:`~VocabularyAPI.get_word`,
  :meth:`~VocabularyAPI.change_difficulty`
* :meth:`VocabularyAPI.list_initial_words`,
  :meth:`~VocabularyAPI.list_words`,
  :meth:`~VocabularyAPI.list_words_by_difficulty`

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with the keys ``status_code``, ``error`` (the service error
kind such as ``not_found``) and ``message``.

The bearer token identifying the caller is passed as ``api_key``; use
``create_token.py`` to issue one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class VocabularyAPI:
    """Client for interacting with the vocabulary list API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        prefix: str = "/api/v1",
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            api_key: Bearer token sent in the ``Authorization`` header.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            prefix: Path prefix of the versioned API.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + prefix
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request and return ``(data, error)``."""
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._error_from_response(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "error": "transport", "message": str(exc)}

    @staticmethod
    def _error_from_response(exc: requests.HTTPError) -> Dict[str, Any]:
        response = exc.response
        status = response.status_code if response is not None else None
        kind = "http_error"
        message = ""
        if response is not None:
            try:
                err_json = response.json()
            except ValueError:
                message = response.text
            else:
                if isinstance(err_json, dict):
                    kind = err_json.get("error") or kind
                    detail = err_json.get("detail") or err_json.get("message")
                    message = detail if isinstance(detail, str) else str(detail or err_json)
                else:
                    message = str(err_json)
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "error": kind, "message": message}

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------
    def create_list(self, name: str) -> Result:
        return self._request("POST", "/lists/", json_body={"name": name})

    def update_list(self, list_id: str, name: str) -> Result:
        return self._request("PUT", f"/lists/{list_id}", json_body={"name": name})

    def get_list(self, list_id: str) -> Result:
        return self._request("GET", f"/lists/{list_id}")

    def delete_list(self, list_id: str) -> Result:
        return self._request("DELETE", f"/lists/{list_id}")

    def list_lists(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/lists/")
        return data or [], error

    def count_words(self, list_id: str) -> Tuple[Optional[int], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", f"/lists/{list_id}/count")
        if error:
            return None, error
        return data.get("count") if isinstance(data, dict) else None, None

    # ------------------------------------------------------------------
    # Words inside a list
    # ------------------------------------------------------------------
    def add_word(self, list_id: str, word: str, meaning: str, difficulty: int) -> Result:
        payload = {"word": word, "meaning": meaning, "difficulty": difficulty}
        return self._request("POST", f"/lists/{list_id}/words", json_body=payload)

    def update_word(
        self, list_id: str, word_id: str, word: str, meaning: str, difficulty: int
    ) -> Result:
        payload = {"word": word, "meaning": meaning, "difficulty": difficulty}
        return self._request("PUT", f"/lists/{list_id}/words/{word_id}", json_body=payload)

    def delete_word(self, list_id: str, word_id: str) -> Result:
        return self._request("DELETE", f"/lists/{list_id}/words/{word_id}")

    def get_word(self, list_id: str, word_id: str) -> Result:
        return self._request("GET", f"/lists/{list_id}/words/{word_id}")

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------
    def change_difficulty(self, word_id: str, difficulty: int) -> Result:
        return self._request(
            "PATCH", f"/words/{word_id}/difficulty", json_body={"difficulty": difficulty}
        )

    def list_initial_words(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/words/initial")
        return data or [], error

    def list_words(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/words/")
        return data or [], error

    def list_words_by_difficulty(
        self, difficulty: int
    ) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", f"/words/difficulty/{difficulty}")
        return data or [], error
