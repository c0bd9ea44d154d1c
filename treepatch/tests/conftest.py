# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

import treepatch.config


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


@fixture
def json_schema_patch(request):
    schema_path = os.path.join(schema_dir, 'patch_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(request, json_schema_patch):
    return Validator(json_schema_patch)


@fixture
def json_files(tmpdir):
    """Fixture writing json documents into a temporary directory.

    Returns a function taking a filename and a document,
    returning the full path of the written file.
    """
    def write(name, doc):
        fn = str(tmpdir.join(name))
        with io.open(fn, 'w', encoding='utf8') as f:
            json.dump(doc, f)
        return fn
    return write


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run with config lookup restricted to an empty temporary directory."""
    monkeypatch.setattr(treepatch.config, 'config_path', lambda: [str(tmpdir)])
    monkeypatch.setattr(treepatch.config, '_config_cache', {})
    return tmpdir


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')
