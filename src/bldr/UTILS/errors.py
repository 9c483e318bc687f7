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
Exception types raised by bldr.
"""


class BldrError(Exception):
    """Base exception for bldr errors."""


class ConfigError(BldrError):
    """The storage configuration could not be read."""


class StoreError(BldrError):
    """The container store could not be read."""


class ImageUnknownError(StoreError, KeyError):
    """No image in the store matches the requested ID or name."""

    def __init__(self, image: str):
        self.image = image
        super().__init__(f"image not known: {image}")

    def __str__(self) -> str:
        return self.args[0]


class ListingError(BldrError):
    """Enumerating containers failed."""

    def __init__(self, message: str, cause: Exception):
        self.cause = cause
        super().__init__(f"{message}: {cause}")
