# -*- coding: utf-8 -*-
"""LLM calling service (OpenAI-compatible chat completions, xAI Grok by default).

Chat, insights, reflections and research all go through this module.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Sequence

import httpx
from fastapi import HTTPException

from .config import settings

log = logging.getLogger(__name__)

EMPTY_RESPONSE_FALLBACK = "I apologize, but I couldn't generate a response."


def resolve_llm_settings() -> Dict[str, Any]:
    if not settings.llm_api_key:
        raise HTTPException(status_code=500, detail="LLM API key not set")
    return {
        "model": settings.llm_model,
        "base_url": settings.llm_base_url,
        "api_key": settings.llm_api_key,
        "timeout": settings.llm_timeout,
        "temperature": settings.llm_temperature,
        "max_tokens": settings.llm_max_tokens,
    }


def _completions_url(base_url: str) -> str:
    base_url = base_url.rstrip("/")
    if base_url.endswith("/chat/completions"):
        return base_url
    return f"{base_url}/chat/completions"


def _request_parts(messages: Sequence[Dict[str, str]]) -> tuple[Dict[str, Any], str, Dict[str, Any], Dict[str, str]]:
    cfg = resolve_llm_settings()
    payload = {
        "model": cfg["model"],
        "messages": list(messages),
        "temperature": cfg["temperature"],
        "max_tokens": cfg["max_tokens"],
    }
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {cfg['api_key']}",
    }
    return cfg, _completions_url(cfg["base_url"]), payload, headers


def extract_content(data: Any) -> str:
    try:
        content = data.get("choices", [{}])[0].get("message", {}).get("content") or ""
    except (AttributeError, IndexError):
        content = ""
    if isinstance(content, list):
        content = "".join(part.get("text", "") for part in content if isinstance(part, dict))
    content = str(content).strip()
    return content or EMPTY_RESPONSE_FALLBACK


def call_llm(messages: List[Dict[str, str]]) -> str:
    cfg, url, payload, headers = _request_parts(messages)
    try:
        with httpx.Client(timeout=cfg["timeout"], follow_redirects=True) as client:
            resp = client.post(url, json=payload, headers=headers)
            resp.raise_for_status()
            data = resp.json()
    except httpx.HTTPStatusError as exc:
        log.warning("LLM API error: %s", exc.response.status_code)
        raise HTTPException(status_code=502, detail=f"LLM API error: {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        log.warning("LLM API unreachable: %s", exc)
        raise HTTPException(status_code=502, detail=f"LLM API unreachable: {exc}") from exc
    return extract_content(data)


async def acall_llm(messages: List[Dict[str, str]], client: httpx.AsyncClient | None = None) -> str:
    cfg, url, payload, headers = _request_parts(messages)
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=cfg["timeout"], follow_redirects=True) as own_client:
                resp = await own_client.post(url, json=payload, headers=headers)
        else:
            resp = await client.post(url, json=payload, headers=headers)
        resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPStatusError as exc:
        log.warning("LLM API error: %s", exc.response.status_code)
        raise HTTPException(status_code=502, detail=f"LLM API error: {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        log.warning("LLM API unreachable: %s", exc)
        raise HTTPException(status_code=502, detail=f"LLM API unreachable: {exc}") from exc
    return extract_content(data)


async def gather_llm(batches: Dict[str, List[Dict[str, str]]]) -> Dict[str, str]:
    """Run several independent prompts concurrently, keyed by name."""
    cfg = resolve_llm_settings()
    async with httpx.AsyncClient(timeout=cfg["timeout"], follow_redirects=True) as client:
        keys = list(batches.keys())
        results = await asyncio.gather(*(acall_llm(batches[k], client=client) for k in keys))
    return dict(zip(keys, results))


def complete(system_prompt: str, user_content: str) -> str:
    return call_llm(
        [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_content},
        ]
    )
