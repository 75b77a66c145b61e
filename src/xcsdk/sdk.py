#
#  xcsdk | xcsdk
#  sdk.py
#
#  SDK identifiers as reported by xcodebuild, and their classification
#
#  Every build fan-out and merge decision keys off the tables in here, so each one
#  must cover every member of SDK. tests/test_xcsdk.py checks that they do.
#
#  This file is part of xcsdk. xcsdk is free software that
#  is made available under the MIT license. Consult the
#  file "LICENSE" that is distributed together with this file
#  for the exact licensing terms.
#
#  Copyright (c) 0cyn 2022.
#

from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from xcsdk.exceptions import UnrecognizedSDKException
from xcsdk.log import log
from xcsdk.platform import Platform
from xcsdk.util import ignore


class SDK(Enum):
    """
    A concrete destination xcodebuild can build for.

    The value is the canonical (lowercase) key xcodebuild uses for the SDK.
    """
    macOSX = "macosx"
    iPhoneOS = "iphoneos"
    iPhoneSimulator = "iphonesimulator"
    watchOS = "watchos"
    watchSimulator = "watchsimulator"
    tvOS = "appletvos"
    tvSimulator = "appletvsimulator"

    @staticmethod
    def from_string(raw: str) -> 'SDK':
        """
        Parse an SDK key as returned from xcodebuild. Matching is case-insensitive.

        :param raw: SDK key
        :raises UnrecognizedSDKException: if the key doesn't name a known SDK. Carries `raw` unmodified.
        :return: SDK
        """
        sdk = try_parse(raw)
        if sdk is None:
            log.debug(f'No SDK matches key "{raw}"')
            raise UnrecognizedSDKException(str(raw))
        return sdk

    @property
    def is_simulator(self) -> bool:
        return self in _SIMULATOR_SDKS

    @property
    def is_device(self) -> bool:
        return self not in _SIMULATOR_SDKS

    @property
    def platform(self) -> Platform:
        return _SDK_PLATFORMS[self]

    @property
    def description(self) -> str:
        return _SDK_DESCRIPTIONS[self]

    def __str__(self):
        return self.description


_SIMULATOR_SDKS: FrozenSet[SDK] = frozenset([SDK.iPhoneSimulator, SDK.watchSimulator, SDK.tvSimulator])

_SDK_PLATFORMS: Dict[SDK, Platform] = {
    SDK.macOSX: Platform.macOS,
    SDK.iPhoneOS: Platform.iOS,
    SDK.iPhoneSimulator: Platform.iOS,
    SDK.watchOS: Platform.watchOS,
    SDK.watchSimulator: Platform.watchOS,
    SDK.tvOS: Platform.tvOS,
    SDK.tvSimulator: Platform.tvOS,
}

_SDK_DESCRIPTIONS: Dict[SDK, str] = {
    SDK.macOSX: "macOS",
    SDK.iPhoneOS: "iOS Device",
    SDK.iPhoneSimulator: "iOS Simulator",
    SDK.watchOS: "watchOS",
    SDK.watchSimulator: "watchOS Simulator",
    SDK.tvOS: "tvOS",
    SDK.tvSimulator: "tvOS Simulator",
}

# Built once; lookups are by normalized key
_SDK_KEYS: Dict[str, SDK] = {sdk.value: sdk for sdk in SDK}

ALL_SDKS: FrozenSet[SDK] = frozenset(SDK)


def try_parse(raw: str) -> Optional[SDK]:
    if not isinstance(raw, str):
        return None
    return _SDK_KEYS.get(raw.lower())


def parse(raw: str) -> SDK:
    return SDK.from_string(raw)


def is_simulator(sdk: SDK) -> bool:
    return sdk.is_simulator


def platform(sdk: SDK) -> Platform:
    return sdk.platform


def describe(sdk: SDK) -> str:
    return sdk.description


def partition(sdks: Iterable[SDK]) -> Tuple[List[SDK], List[SDK]]:
    """
    Split SDKs into simulator ones and device ones.

    Both lists keep the input order, duplicates included.

    :param sdks: any iterable of SDK
    :return: (simulators, devices)
    """
    simulators = []
    devices = []
    for sdk in sdks:
        if sdk.is_simulator:
            simulators.append(sdk)
        else:
            devices.append(sdk)
    return simulators, devices


def parse_sdk_list(value: str) -> List[SDK]:
    """
    Parse a whitespace separated list of SDK keys, e.g. the SUPPORTED_PLATFORMS build setting.

    Unknown keys raise, unless ignore.UNRECOGNIZED_SDKS is set, in which case they're skipped.

    :param value: build setting value
    :return: SDKs in the order they appear
    """
    sdks = []
    for key in value.split():
        try:
            sdks.append(SDK.from_string(key))
        except UnrecognizedSDKException as ex:
            if not ignore.UNRECOGNIZED_SDKS:
                raise ex
            log.warn(f'Skipping {ex}')
    return sdks


def group_by_platform(sdks: Iterable[SDK]) -> Dict[Platform, List[SDK]]:
    groups: Dict[Platform, List[SDK]] = {}
    for sdk in sdks:
        groups.setdefault(sdk.platform, []).append(sdk)
    return groups
