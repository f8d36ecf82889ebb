"""CLI Commands"""

import os
import sys

from commit_auto.output import bold, dim

PROG = 'git-commit-auto'


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    line = f'eval "$(register-python-argcomplete {PROG})"'
    if 'zsh' in shell or 'bash' in shell:
        rc_name = '.zshrc' if 'zsh' in shell else '.bashrc'
        rc_file = os.path.expanduser(f'~/{rc_name}')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim(f'source ~/{rc_name}')}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print(f"  register-python-argcomplete --shell powershell {PROG} | Out-String | Invoke-Expression\n")
        print("To make it permanent, add it to your $PROFILE.")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f'  {line}\n')
        print(f"  {dim('# Fish')}")
        print(f"  register-python-argcomplete --shell fish {PROG} | source")

    print(f"\n{dim('After setup, press TAB to autocomplete modes and flags.')}")
    return 0
