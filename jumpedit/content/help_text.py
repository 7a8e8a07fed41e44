"""
Help text for je.

Extracted from cli.py for separation of concerns.
"""

HELP_TEXT = """\
je (j)ump (e)dit help page

Usage:
   je [-j|-e] <label> ........... jump to labeled jump path and open editor
                                  see example (5).
      -j | --jump ............... [jump] only jump to label directory.
      -e | --edit ............... [edit] only edit at label path.

   je add <label> <path> <dir> .  adds user label and jump path with optional
                                  shell directory. See description (4).

   je rm  <label> ............... removes a user jump label.

   je default-editor <editor> ... specifies default editor
                                  when opening paths.

   je list [-l|-j|-d]............ displays labels with jumps and directories
      -l | --label .............. [label] labels in one line
      -j | --jump ............... [jump] only labels with jump
      -d | --directory .......... [directory] only labels with directories

   je --help .................... prints help.

Description:
   1) je (jump edit) allows user to save a jump path to an
      alias, a.k.a a label.

   2) A label has two components, a jump path, and a shell directory.

   3) The jump path can point to a file or a directory, which tells je
      where to open the file or directory using the default editor.

   4) If no shell directory is specified, je will infer
      the directory in two ways
         a) if jump path is a file, the shell directory will be the
            same directory the file is in. See example (2)
         b) if jump path is a directory, the shell directory
            will be the same as the jump path. See example (3)

   5) A user might want to set the shell directory to their project root
      directory so that 'things' work as expected while editing.
      See example (4).

   6) User must specify a default editor, which will be
      used by je to open all jump paths. See example (1).

Examples:
   1) Add your editor of choice as default

      'je default-editor vim'
      'je default-editor nvim'
      'je default-editor code --wait'

   2) Add ~/.bashrc file as path, je will infer the shell directory
      as the home '~/' directory that .bashrc is in

      'je add bash ~/.bashrc'

   3) Add ~/.local/ directory as path, je will infer the shell
      directory as the same directory

      'je add loc ~/.local'

   4) Add main.c as jump path and myproj-root as the shell directory

      'je add myproj ~/c-programs/myproj-root/src/main.c ~/c-programs/myproj-root/'

   5) Use myproj label with 3 options

      'je myproj'     cd to label shell directory and open editor at jump path
      'je -j myproj'  only cd to label shell directory, does not open editor
      'je -e myproj'  only opens editor, does not change shell directory

   6) Display what jump labels user has added

      'je list'

   7) Remove label user does not want anymore

      'je rm bash'
      'je rm myproj'

Important Information:
   - je was built for max typing efficiency, thus the base
     command 'je <label>' is blocked by the sub commands
     (list, add, rm, default-editor). Labels can not use
     those names, 'je add' rejects them.

   - 'je <label>' prints a shell command instead of running it.
     Wrap je in a shell function that evals its output, e.g.

        je() { local out; out="$(command je "$@")" || return; \\
               case "$1" in add|rm|list|default-editor|-h|--help) \\
               printf '%s\\n' "$out";; *) eval "$out";; esac; }

   - Data lives in $XDG_DATA_HOME/je (or ~/.local/share/je);
     set JE_DATA_DIR to use another directory.

Happy Jump Editing
"""
