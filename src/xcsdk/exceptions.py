#
#  xcsdk | xcsdk
#  exceptions.py
#
#  Exceptions raised while classifying toolchain-reported identifiers
#
#  This file is part of xcsdk. xcsdk is free software that
#  is made available under the MIT license. Consult the
#  file "LICENSE" that is distributed together with this file
#  for the exact licensing terms.
#
#  Copyright (c) 0cyn 2022.
#


class XCSDKException(Exception):
    """
    """


class UnrecognizedSDKException(XCSDKException):
    """
    The build tool reported an SDK key we don't know about.

    .raw holds the key exactly as it was reported (before lower-casing).
    """

    def __init__(self, raw: str):
        super().__init__(f'unexpected SDK key "{raw}"')
        self.raw = raw


class UnrecognizedPlatformException(XCSDKException):
    """
    """

    def __init__(self, raw: str):
        super().__init__(f'unexpected platform "{raw}"')
        self.raw = raw
