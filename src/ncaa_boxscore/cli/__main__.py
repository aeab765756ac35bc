from ncaa_boxscore.cli.main import app

app(prog_name="ncaa-boxscore")
