from stockroom.main import run

run()
