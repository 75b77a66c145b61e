#
#  xcsdk | xcsdk
#  display.py
#
#  Human-readable SDK listings for progress and log output
#
#  This file is part of xcsdk. xcsdk is free software that
#  is made available under the MIT license. Consult the
#  file "LICENSE" that is distributed together with this file
#  for the exact licensing terms.
#
#  Copyright (c) 0cyn 2022.
#
import json
from typing import Dict, Iterable, List, Optional

from xcsdk.sdk import SDK, group_by_platform, partition
from xcsdk.util import Table, highlight_json


def sdk_table(sdks: Optional[Iterable[SDK]] = None, dividers=False) -> Table:
    """
    Build a table with one row per SDK (label, key, platform, kind).

    :param sdks: SDKs to list; every SDK, in definition order, if None
    :param dividers: Draw box borders
    :return: Table, call .render() for text
    """
    table = Table(dividers=dividers)
    table.titles = ['SDK', 'Key', 'Platform', 'Kind']
    for sdk in (SDK if sdks is None else sdks):
        table.rows.append([sdk.description, sdk.value, sdk.platform.name,
                           'simulator' if sdk.is_simulator else 'device'])
    return table


def sdk_summary(sdks: Iterable[SDK]) -> Dict[str, Dict[str, List[str]]]:
    summary = {}
    for platform, members in group_by_platform(sdks).items():
        simulators, devices = partition(members)
        summary[platform.value] = {
            'simulators': [sdk.value for sdk in simulators],
            'devices': [sdk.value for sdk in devices],
        }
    return summary


def sdk_summary_json(sdks: Iterable[SDK]) -> str:
    return highlight_json(json.dumps(sdk_summary(sdks), indent=4))
