"""Two-pass assembler for the Hack .asm language."""
