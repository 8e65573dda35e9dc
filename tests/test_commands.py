# tests/test_commands.py
from vcd_responses import DISK_NAME, DISK_URL, VDC_WITH_TWO_DISKS_LINK


def test_summary_command(app, session):
    result = app.test_cli_runner().invoke(args=['vdc', 'summary'])

    assert result.exit_code == 0
    assert 'ovdc-1' in result.output
    assert 'CPU disponível (cores): 4' in result.output


def test_disks_command(app, session):
    result = app.test_cli_runner().invoke(args=['vdc', 'disks'])

    assert result.output.strip() == DISK_NAME


def test_delete_disk_command(app, session, mock_vcd_connection):
    result = app.test_cli_runner().invoke(args=['vdc', 'delete-disk', DISK_NAME])

    assert result.exit_code == 0
    mock_vcd_connection.delete.assert_called_once_with(DISK_URL)


def test_delete_disk_command_conflict(app, session, mock_vcd_connection):
    app.config['VCD_VDC_LINK'] = VDC_WITH_TWO_DISKS_LINK

    result = app.test_cli_runner().invoke(args=['vdc', 'delete-disk', DISK_NAME])

    assert result.exit_code == 1
    assert f'2 disks with name {DISK_NAME} were found' in result.output
    mock_vcd_connection.delete.assert_not_called()


def test_delete_disk_command_all(app, session, mock_vcd_connection):
    app.config['VCD_VDC_LINK'] = VDC_WITH_TWO_DISKS_LINK

    result = app.test_cli_runner().invoke(args=['vdc', 'delete-disk', DISK_NAME, '--all'])

    assert result.exit_code == 0
    assert mock_vcd_connection.delete.call_count == 2
