from xcsdk.platform import Platform, SUPPORTED_PLATFORMS
from xcsdk.sdk import SDK, ALL_SDKS, parse, try_parse, is_simulator, describe, partition, parse_sdk_list, \
    group_by_platform
from xcsdk.exceptions import XCSDKException, UnrecognizedSDKException, UnrecognizedPlatformException
from xcsdk.display import sdk_table, sdk_summary, sdk_summary_json
from xcsdk.util import XCSDK_VERSION, ignore, opts, Table
from xcsdk.log import log, LogLevel
