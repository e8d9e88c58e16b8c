from .check import handle_check, check_file, collect_files
