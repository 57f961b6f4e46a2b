from dep_conflict_checker.main import run

run()
