# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Shared fixtures for writing container stores to disk.
"""
import json
import pytest
from bldr.MODELS.storage_entities import BUILDER_STATE_TYPE
from bldr.PARSERS.storage_conf_parser import StoreOptions


def _builder_state(container_id, image_id="", name="", image=""):
    """Build the contents of a working container's state file."""
    return {
        "type": BUILDER_STATE_TYPE,
        "image": image,
        "image-id": image_id,
        "container-name": name,
        "container-id": container_id,
    }


@pytest.fixture
def make_store(tmp_path):
    """
    Returns a function that lays out a store under tmp_path and returns its
    options. ``builders`` maps container IDs to state file contents.
    """
    def _make_store(containers=(), images=(), builders=None, driver="overlay"):
        root = tmp_path / "storage"
        containers_dir = root / f"{driver}-containers"
        images_dir = root / f"{driver}-images"
        containers_dir.mkdir(parents=True, exist_ok=True)
        images_dir.mkdir(parents=True, exist_ok=True)
        (containers_dir / "containers.json").write_text(json.dumps(list(containers)))
        (images_dir / "images.json").write_text(json.dumps(list(images)))
        for container_id, state in (builders or {}).items():
            userdata = containers_dir / container_id / "userdata"
            userdata.mkdir(parents=True, exist_ok=True)
            (userdata / "bldr.json").write_text(json.dumps(state))
        return StoreOptions(root=str(root), driver=driver)

    return _make_store


@pytest.fixture
def scenario_store(make_store):
    """
    One working container b1 on alpine, plus a foreign container c2 whose
    image is missing from the store.
    """
    return make_store(
        containers=[
            {"id": "b1", "names": ["work1"], "image": "i1"},
            {"id": "c2", "names": [], "image": "i2"},
        ],
        images=[{"id": "i1", "names": ["alpine:latest"]}],
        builders={"b1": _builder_state("b1", image_id="i1", name="work1", image="alpine")},
    )


@pytest.fixture
def builder_state():
    """Returns the working container state file factory."""
    return _builder_state
