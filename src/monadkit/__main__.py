from monadkit.cli import app

app(prog_name='monadkit')
