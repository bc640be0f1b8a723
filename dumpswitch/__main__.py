from dumpswitch.cli import app

app(prog_name='dumpswitch')
