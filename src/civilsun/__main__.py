from .cli.sun import main

main(prog_name="civilsun")
