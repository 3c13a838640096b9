"""HTTP clients for the three name-prediction services."""
from __future__ import annotations

from dataclasses import dataclass

import httpx

from personinfo.config import Settings
from personinfo.infra.predictors.agify import AgifyClient
from personinfo.infra.predictors.genderize import GenderizeClient
from personinfo.infra.predictors.nationalize import NationalizeClient


@dataclass
class Predictors:
    age: AgifyClient
    gender: GenderizeClient
    nationality: NationalizeClient
    http: httpx.Client

    def close(self) -> None:
        self.http.close()


def build_predictors(settings: Settings) -> Predictors:
    """One pooled ``httpx.Client`` shared by all three providers."""
    http = httpx.Client()
    timeout = settings.PROVIDER_TIMEOUT_SECONDS
    return Predictors(
        age=AgifyClient(settings.AGIFY_URL, timeout=timeout, client=http),
        gender=GenderizeClient(settings.GENDERIZE_URL, timeout=timeout, client=http),
        nationality=NationalizeClient(settings.NATIONALIZE_URL, timeout=timeout, client=http),
        http=http,
    )


__all__ = ["AgifyClient", "GenderizeClient", "NationalizeClient", "Predictors", "build_predictors"]
