from legal_notice.cli import run

run()
