"""Unit tests for interface extraction and merging."""

import pytest

from utils.bssid.constants import INTERFACE_FIELDS
from utils.bssid import (
    InterfaceEntry,
    PatternSet,
    extract_interfaces,
    extract_addresses,
    extract_macs,
    merge_entries,
    filter_access_interfaces,
    flatten_cli_output,
)


TABLE_OUTPUT = """
Name     MAC addr           Mode     State  Chan(Width) VLAN  Radio Hive  SSID
------   ---------------    -----    -----  ----------- ----  ----- ----  ----
wifi0    00:11:22:33:44:55  AP       up     11(20)      1     wifi0 hive1 TestSSID
wifi1    AA:BB:CC:DD:EE:FF  AP       up     36(80)      10    wifi1 hive2 Corp
"""

HIVEOS_OUTPUT = """
Name       MAC addr        Mode     State Chan(Width) VLAN Radio  Hive   SSID
---------- --------------- -------- ----- ----------- ---- ------ ------ ------
wifi0.1    0019:7700:1a10  access   U     6(20)       1    wifi0  hive0  Guest
wifi1.1    0019:7700:1a24  access   U     149(80)     10   wifi1  hive0  Corp
wifi1.2    0019:7700:1a25  backhaul U     149(80)     1    wifi1  hive0  N/A
"""


class TestExtractInterfaces:
    """Tests for extract_interfaces()."""

    def test_table_rows(self):
        """Test a plain table yields its rows."""
        entries = extract_interfaces(TABLE_OUTPUT)

        assert [e.name for e in entries] == ['wifi0', 'wifi1']
        assert [e.mac for e in entries] == ['00:11:22:33:44:55', 'AA:BB:CC:DD:EE:FF']
        assert [e.ssid for e in entries] == ['TestSSID', 'Corp']

    def test_bssid_lines_without_table(self):
        """Test BSSID mentions alone produce address-only entries."""
        output = "BSSID: 00:11:22:33:44:55\nSome other line\nbssid AA:BB:CC:DD:EE:FF"
        entries = extract_interfaces(output)

        assert len(entries) == 2
        assert {e.mac for e in entries} == {'00:11:22:33:44:55', 'AA:BB:CC:DD:EE:FF'}
        assert all(e.name == '' and e.ssid == '' for e in entries)

    def test_table_entry_wins_over_bssid_mention(self):
        """Test a BSSID line repeating a table address adds nothing."""
        output = TABLE_OUTPUT + "\nBSSID: 00:11:22:33:44:55\n"
        entries = extract_interfaces(output)

        matching = [e for e in entries if e.mac == '00:11:22:33:44:55']
        assert len(matching) == 1
        assert matching[0].name == 'wifi0'
        assert matching[0].hive == 'hive1'
        assert len(entries) == 2

    def test_table_entries_precede_fallback_entries(self):
        """Test address-only entries come after every table row."""
        output = "BSSID 66:77:88:99:AA:BB\n" + TABLE_OUTPUT
        entries = extract_interfaces(output)

        assert [e.mac for e in entries] == [
            '00:11:22:33:44:55',
            'AA:BB:CC:DD:EE:FF',
            '66:77:88:99:AA:BB',
        ]
        assert entries[-1] == InterfaceEntry(mac='66:77:88:99:AA:BB')

    def test_repeated_bssid_mentions_collapse(self):
        """Test the same BSSID on several lines is returned once."""
        output = "BSSID 66:77:88:99:aa:bb\nbssid 66:77:88:99:AA:BB\nBSSID 01:02:03:04:05:06"
        entries = extract_interfaces(output)

        assert extract_macs(entries) == ['66:77:88:99:AA:BB', '01:02:03:04:05:06']

    def test_repeated_table_rows_collapse(self):
        """Test the merged output never repeats an address."""
        line = "wifi0 00:11:22:33:44:55 AP up 11(20) 1 wifi0 hive1 Lab"
        entries = extract_interfaces(f"{line}\n{line}\nBSSID 00:11:22:33:44:55")

        assert len(entries) == 1

    def test_normalizes_hiveos_mac_layout(self):
        """Test colon separated quads are canonicalized."""
        entries = extract_interfaces(HIVEOS_OUTPUT)

        assert extract_macs(entries) == [
            '00:19:77:00:1A:10',
            '00:19:77:00:1A:24',
            '00:19:77:00:1A:25',
        ]
        assert entries[2].mode == 'backhaul'

    def test_table_with_mac_column_label_in_data_is_skipped(self):
        """Test lines carrying the address header fragment are not parsed."""
        output = "wifi0 00:11:22:33:44:55 AP up 11(20) 1 wifi0 hive1 MAC addr"
        assert extract_interfaces(output) == []

    @pytest.mark.parametrize('output', ['', '\n\n', 'nothing to see here'])
    def test_no_matches(self, output):
        """Test empty or unrelated output yields nothing."""
        assert extract_interfaces(output) == []
        assert extract_addresses(output) == []

    def test_no_duplicate_addresses_in_mixed_output(self):
        """Test uniqueness of non-empty MACs over a mixed sample."""
        output = (
            TABLE_OUTPUT + HIVEOS_OUTPUT
            + "BSSID 00:11:22:33:44:55 aa:bb:cc:dd:ee:ff 00:19:77:00:1a:10\n"
            + "bssid list: 12:34:56:78:9a:bc 12:34:56:78:9A:BC\n"
        )
        macs = extract_addresses(output)

        assert len(macs) == len(set(macs))
        assert macs[-1] == '12:34:56:78:9A:BC'

    def test_custom_pattern_set(self):
        """Test an explicit pattern set is used instead of the default."""
        patterns = PatternSet.compile(bssid_keywords=['radio'])
        output = "radio 00:11:22:33:44:55\nBSSID AA:BB:CC:DD:EE:FF"

        assert extract_addresses(output, patterns) == ['00:11:22:33:44:55']


class TestExtractAddresses:
    """Tests for the address projection helpers."""

    def test_matches_interface_macs(self):
        entries = extract_interfaces(TABLE_OUTPUT)
        assert extract_addresses(TABLE_OUTPUT) == [e.mac for e in entries]

    def test_extract_macs_is_projection(self):
        entries = [InterfaceEntry(name='a', mac='X'), InterfaceEntry(mac='')]
        assert extract_macs(entries) == ['X', '']


class TestMergeEntries:
    """Tests for merge_entries()."""

    def test_keep_first(self):
        full = InterfaceEntry(name='wifi0', mac='00:11:22:33:44:55')
        bare = InterfaceEntry(mac='00:11:22:33:44:55')

        assert merge_entries([full], [bare]) == [full]
        assert merge_entries([bare], [full]) == [bare]

    def test_entries_without_mac_are_kept(self):
        blank = InterfaceEntry(name='wifi9')
        assert merge_entries([blank], [blank]) == [blank, blank]

    def test_no_sequences(self):
        assert merge_entries() == []


class TestAccessFilter:
    """Tests for filter_access_interfaces()."""

    def test_keeps_access_mode_only(self):
        entries = extract_interfaces(HIVEOS_OUTPUT)
        access = filter_access_interfaces(entries)

        assert [e.name for e in access] == ['wifi0.1', 'wifi1.1']

    def test_case_insensitive(self):
        entries = [InterfaceEntry(mode='Access'), InterfaceEntry(mode='AP')]
        assert filter_access_interfaces(entries) == [entries[0]]


class TestFlattenCliOutput:
    """Tests for flatten_cli_output()."""

    def test_string_passthrough(self):
        assert flatten_cli_output("abc\ndef") == "abc\ndef"

    def test_list_of_outputs_joined(self):
        value = [{'output': 'line one'}, {'cli': 'x'}, {'output': 'line two'}]
        assert flatten_cli_output(value) == "line one\nline two"

    def test_other_values_rendered_as_json(self):
        assert flatten_cli_output({'error': 'timeout'}) == '{"error": "timeout"}'

    def test_none(self):
        assert flatten_cli_output(None) == ''


class TestInterfaceEntry:
    """Tests for the InterfaceEntry model."""

    def test_defaults_are_empty(self):
        entry = InterfaceEntry.minimal('00:11:22:33:44:55')
        assert entry.to_dict() == {
            'name': '',
            'mac': '00:11:22:33:44:55',
            'mode': '',
            'state': '',
            'channel': '',
            'vlan': '',
            'radio': '',
            'hive': '',
            'ssid': '',
        }

    def test_frozen(self):
        entry = InterfaceEntry(mac='00:11:22:33:44:55')
        with pytest.raises(AttributeError):
            entry.mac = 'AA:BB:CC:DD:EE:FF'

    def test_field_order_matches_table_columns(self):
        """Test the model fields follow the table column order."""
        assert tuple(InterfaceEntry().to_dict()) == INTERFACE_FIELDS

    def test_has_mode(self):
        entry = InterfaceEntry(mode='Backhaul')
        assert entry.has_mode('backhaul') is True
        assert entry.has_mode('access') is False


class TestEmbeddedControlCharacters:
    """Tests for control characters that are not line breaks."""

    def test_form_feed_row_is_extracted(self):
        output = "wifi0 00:11:22:33:44:55 AP up 11(20) 1\x0cwifi0 hive1 Lab"
        assert [e.name for e in extract_interfaces(output)] == ['wifi0']

    def test_next_line_bssid_is_extracted(self):
        assert extract_addresses("BSSID:\x8500:11:22:33:44:55") == ['00:11:22:33:44:55']


class TestAccessFilterMode:
    """Tests for filter_access_interfaces() with a configured mode."""

    def test_custom_access_mode(self):
        entries = extract_interfaces(TABLE_OUTPUT)
        assert filter_access_interfaces(entries, 'ap') == entries
        assert filter_access_interfaces(entries) == []
