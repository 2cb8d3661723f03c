from redasync.main import run

run()
