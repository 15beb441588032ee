from __future__ import annotations

import importlib

import pytest


@pytest.mark.unit
@pytest.mark.parametrize(
    "module",
    [
        "tzconvert.models",
        "tzconvert.zones",
        "tzconvert.convert",
        "tzconvert.cities",
        "tzconvert.i18n",
        "tzconvert.settings",
        "tzconvert.renderers.cards",
        "tzconvert.renderers.plotly_map",
        "tzconvert.timeboard",
    ],
)
def test_import_module(module: str) -> None:
    importlib.import_module(module)
