from scummer.main import run

run()
