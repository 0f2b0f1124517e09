from ledger_api.main import run

run()
