from iniview.cli.app import app

app(prog_name="iniview")
