import click
from flask.cli import AppGroup

from nubevdc.extensions import vcloud_client
from nubevdc.vcloud.errors import CloudError

vdc_cli = AppGroup('vdc', help='Operações sobre o VDC configurado (VCD_VDC_LINK).')


@vdc_cli.command('summary')
def summary_command():
    """Mostra nome, link e capacidade disponível do VDC."""
    vdc = vcloud_client.get_vdc()
    resources = vdc.resources
    click.echo(f"VDC: {vdc.name} ({vdc.href})")
    click.echo(f"CPU disponível (cores): {resources.cpu.available_cores}")
    click.echo(f"Memória disponível (MB): {resources.memory.available_mb}")


@vdc_cli.command('disks')
def disks_command():
    """Lista os nomes dos discos independentes."""
    for name in vcloud_client.get_vdc().list_disks():
        click.echo(name)


@vdc_cli.command('delete-disk')
@click.argument('name')
@click.option('--all', 'delete_all', is_flag=True, help='Exclui todos os discos com o nome (best-effort).')
def delete_disk_command(name, delete_all):
    """Exclui o disco NAME."""
    vdc = vcloud_client.get_vdc()
    try:
        if delete_all:
            vdc.delete_all_disks_by_name(name)
        else:
            vdc.delete_disk_by_name(name)
    except CloudError as e:
        raise click.ClickException(str(e))
    click.echo(f"Disco(s) '{name}' excluído(s).")
