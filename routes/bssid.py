"""
BSSID extraction routes.

Provides a REST API that turns raw HiveOS CLI output into interface records.
"""

from __future__ import annotations

import re
from typing import Optional

from flask import Blueprint, current_app, jsonify, request, Response

from utils.bssid import (
    InterfaceEntry,
    PatternSet,
    extract_interfaces,
    extract_macs,
    filter_access_interfaces,
    flatten_cli_output,
    get_pattern_set,
    is_canonical_mac,
)
from utils.logging import get_logger

logger = get_logger('bssidscan.bssid')

bssid_bp = Blueprint('bssid', __name__, url_prefix='/bssid')

# Signed 64-bit decimal, ASCII digits only
_DEVICE_ID_RE = re.compile(r'[+-]?[0-9]+')
_DEVICE_ID_MIN = -(2 ** 63)
_DEVICE_ID_MAX = 2 ** 63 - 1


def _get_patterns() -> PatternSet:
    """Get the app's pattern set, or the shared default."""
    return current_app.extensions.get('bssid_patterns') or get_pattern_set()


def _entry_payload(entry: InterfaceEntry) -> dict:
    """Serialize an entry, flagging addresses that could not be canonicalized."""
    payload = entry.to_dict()
    payload['degraded'] = not is_canonical_mac(entry.mac)
    return payload


def _parse_device_id(value: str) -> Optional[int]:
    """Parse a device id key; None unless it is a plain signed 64-bit integer."""
    if not _DEVICE_ID_RE.fullmatch(value):
        return None
    device_id = int(value)
    if not _DEVICE_ID_MIN <= device_id <= _DEVICE_ID_MAX:
        return None
    return device_id


def _extract(output, access_only: bool, patterns: PatternSet) -> list[InterfaceEntry]:
    entries = extract_interfaces(flatten_cli_output(output), patterns)
    if access_only:
        entries = filter_access_interfaces(entries, patterns.access_mode)
    return entries


def _extract_from_request():
    """Run extraction on the request body; returns (entries, error_response)."""
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or 'output' not in data:
        return None, (jsonify({
            'status': 'error',
            'message': 'Missing "output" field'
        }), 400)

    entries = _extract(data['output'], bool(data.get('access_only')), _get_patterns())
    return entries, None


@bssid_bp.route('/extract', methods=['POST'])
def extract() -> Response:
    """Extract full interface entries from CLI output."""
    try:
        entries, error = _extract_from_request()
        if error:
            return error

        return jsonify({
            'status': 'success',
            'count': len(entries),
            'interfaces': [_entry_payload(entry) for entry in entries]
        })
    except Exception as e:
        logger.error(f"Error extracting interfaces: {e}")
        return jsonify({
            'status': 'error',
            'message': str(e)
        }), 500


@bssid_bp.route('/addresses', methods=['POST'])
def addresses() -> Response:
    """Extract only the BSSIDs from CLI output."""
    try:
        entries, error = _extract_from_request()
        if error:
            return error

        return jsonify({
            'status': 'success',
            'count': len(entries),
            'addresses': extract_macs(entries),
            'degraded': [e.mac for e in entries if not is_canonical_mac(e.mac)]
        })
    except Exception as e:
        logger.error(f"Error extracting addresses: {e}")
        return jsonify({
            'status': 'error',
            'message': str(e)
        }), 500


@bssid_bp.route('/devices', methods=['POST'])
def devices() -> Response:
    """
    Extract interfaces for every device in a CLI result payload.

    Expects the device API's shape: {"device_cli_outputs": {"<id>": <output>}}.
    """
    data = request.get_json(silent=True)
    outputs = data.get('device_cli_outputs') if isinstance(data, dict) else None

    if not isinstance(outputs, dict):
        return jsonify({
            'status': 'error',
            'message': 'Missing "device_cli_outputs" object'
        }), 400

    access_only = bool(data.get('access_only'))
    patterns = _get_patterns()

    try:
        results = []
        total = 0
        for device_id_str, value in outputs.items():
            device_id = _parse_device_id(device_id_str)
            if device_id is None:
                logger.warning(f"Skipping invalid device id: {device_id_str!r}")
                continue

            entries = _extract(value, access_only, patterns)
            total += len(entries)
            results.append({
                'device_id': device_id,
                'count': len(entries),
                'interfaces': [_entry_payload(entry) for entry in entries]
            })

        return jsonify({
            'status': 'success',
            'total': total,
            'devices': results
        })
    except Exception as e:
        logger.error(f"Error extracting device interfaces: {e}")
        return jsonify({
            'status': 'error',
            'message': str(e)
        }), 500
