from __future__ import annotations

import random
from typing import Any

import httpx

from .clock import Clock
from .config_types import ClientConfig
from .dispatcher import Dispatcher

SOURCE_KINDS = ("ad", "messengers", "search", "social")


class LiveSurfClient:
    def __init__(
            self,
            cfg: ClientConfig,
            *,
            transport: httpx.BaseTransport | None = None,
            clock: Clock | None = None,
            rng: random.Random | None = None,
    ):
        self._d = Dispatcher(cfg, transport=transport, clock=clock, rng=rng)

    @property
    def dispatcher(self) -> Dispatcher:
        return self._d

    def close(self) -> None:
        self._d.close()

    def __enter__(self) -> LiveSurfClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # --- generic verbs ---
    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._d.execute("GET", path, params=params)

    def post(self, path: str, data: Any | None = None) -> Any:
        return self._d.execute("POST", path, {} if data is None else data)

    def patch(self, path: str, data: Any | None = None) -> Any:
        return self._d.execute("PATCH", path, {} if data is None else data)

    def delete(self, path: str) -> Any:
        return self._d.execute("DELETE", path)

    # --- catalogues ---
    def get_categories(self) -> Any:
        return self.get("categories/")

    def get_countries(self) -> Any:
        return self.get("countries/")

    def get_languages(self) -> Any:
        return self.get("languages/")

    # --- traffic sources ---
    def get_sources(self, kind: str) -> Any:
        if kind not in SOURCE_KINDS:
            raise ValueError(f"unknown source kind: {kind} (expected one of {', '.join(SOURCE_KINDS)})")
        return self.get(f"sources/{kind}/")

    def get_sources_ad(self) -> Any:
        return self.get_sources("ad")

    def get_sources_messengers(self) -> Any:
        return self.get_sources("messengers")

    def get_sources_search(self) -> Any:
        return self.get_sources("search")

    def get_sources_social(self) -> Any:
        return self.get_sources("social")

    # --- user ---
    def get_user(self) -> Any:
        return self.get("user/")

    def set_auto_mode(self) -> Any:
        return self.post("user/automode/")

    def set_manual_mode(self) -> Any:
        return self.post("user/manualmode/")

    # --- groups ---
    def get_groups(self) -> Any:
        return self.get("group/all/")

    def get_group(self, group_id: int) -> Any:
        return self.get(f"group/{int(group_id)}/")

    def create_group(self, data: dict[str, Any]) -> Any:
        return self.post("group/create/", data)

    def update_group(self, group_id: int, data: dict[str, Any]) -> Any:
        return self.patch(f"group/{int(group_id)}/", data)

    def delete_group(self, group_id: int) -> Any:
        return self.delete(f"group/{int(group_id)}/")

    def clone_group(self, group_id: int, data: dict[str, Any] | None = None) -> Any:
        return self.post(f"group/{int(group_id)}/clone/", data)

    def add_group_credits(self, group_id: int, credits: int) -> Any:
        return self.post(f"group/{int(group_id)}/add_credits/", {"credits": int(credits)})

    # --- pages ---
    def get_page(self, page_id: int) -> Any:
        return self.get(f"page/{int(page_id)}/")

    def create_page(self, data: dict[str, Any]) -> Any:
        return self.post("page/create/", data)

    def update_page(self, page_id: int, data: dict[str, Any]) -> Any:
        return self.patch(f"page/{int(page_id)}/", data)

    def delete_page(self, page_id: int) -> Any:
        return self.delete(f"page/{int(page_id)}/")

    def clone_page(self, page_id: int) -> Any:
        return self.post(f"page/{int(page_id)}/clone/")

    def move_page_up(self, page_id: int) -> Any:
        return self.post(f"page/{int(page_id)}/up/")

    def move_page_down(self, page_id: int) -> Any:
        return self.post(f"page/{int(page_id)}/down/")

    def start_page(self, page_id: int) -> Any:
        return self.post(f"page/{int(page_id)}/start/")

    def stop_page(self, page_id: int) -> Any:
        return self.post(f"page/{int(page_id)}/stop/")

    # --- stats ---
    def get_stats(self, params: dict[str, Any] | None = None) -> Any:
        return self.get("pages-compiled-stats/", params=params or None)
