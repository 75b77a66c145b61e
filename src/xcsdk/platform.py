#
#  xcsdk | xcsdk
#  platform.py
#
#  Platform families an SDK can belong to
#
#  This file is part of xcsdk. xcsdk is free software that
#  is made available under the MIT license. Consult the
#  file "LICENSE" that is distributed together with this file
#  for the exact licensing terms.
#
#  Copyright (c) 0cyn 2022.
#

from enum import Enum
from typing import Tuple

from xcsdk.exceptions import UnrecognizedPlatformException


class Platform(Enum):
    """
    A product family; spans one device SDK and, except for macOS, one simulator SDK.

    The value is the name of the platform's build output directory.
    """
    macOS = "Mac"
    iOS = "iOS"
    watchOS = "watchOS"
    tvOS = "tvOS"

    @property
    def relative_path(self) -> str:
        return f'Build/{self.value}'

    @property
    def sdks(self) -> Tuple:
        # sdk.py imports us, so resolve SDK lazily
        from xcsdk.sdk import SDK
        return tuple(sdk for sdk in SDK if sdk.platform is self)

    @staticmethod
    def from_string(name: str) -> 'Platform':
        try:
            return _PLATFORM_NAMES[name.lower()]
        except (KeyError, AttributeError):
            raise UnrecognizedPlatformException(str(name)) from None

    def __str__(self):
        return self.name


SUPPORTED_PLATFORMS: Tuple[Platform, ...] = (Platform.macOS, Platform.iOS, Platform.watchOS, Platform.tvOS)

_PLATFORM_NAMES = {
    'mac': Platform.macOS,
    'macos': Platform.macOS,
    'osx': Platform.macOS,
    'ios': Platform.iOS,
    'watchos': Platform.watchOS,
    'tvos': Platform.tvOS,
}
