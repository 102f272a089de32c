#!/usr/bin/env python3
"""Generate API reference documentation for klaw-optional."""

import ast
from pathlib import Path

import mkdocs_gen_files

nav = mkdocs_gen_files.Nav()
root = Path(__file__).parent.parent.parent
package_name = 'klaw_optional'
src = root / 'src' / package_name


def get_module_description(module_path: Path) -> str:
    """Extract the first line of a module docstring."""
    if not module_path.exists():
        return ''
    try:
        tree = ast.parse(module_path.read_text(encoding='utf-8'))
    except SyntaxError:
        return ''
    docstring = ast.get_docstring(tree) or ''
    return ' '.join(docstring.split('\n\n')[0].split())


def is_private(path: Path) -> bool:
    """Private modules (any path component starting with a single _) are not documented."""
    return any(part.startswith('_') and not part.startswith('__') for part in path.relative_to(src).parts)


# Generate the main reference index
with mkdocs_gen_files.open('reference/index.md', 'w') as index:
    index.write('# API Reference\n\n')
    index.write(f'::: {package_name}\n')
    index.write('    options:\n')
    index.write('      show_submodules: false\n\n')
    index.write('| Module | Description |\n')
    index.write('|--------|-------------|\n')

    for item in sorted(src.iterdir()):
        if item.name.startswith('_') or item.name == 'py.typed':
            continue
        if item.is_file() and item.suffix == '.py':
            index.write(f'| [{item.stem}]({item.stem}.md) | {get_module_description(item)} |\n')
        elif item.is_dir() and (item / '__init__.py').exists():
            index.write(f'| [{item.name}]({item.name}/index.md) | {get_module_description(item / "__init__.py")} |\n')

nav['reference'] = 'index.md'

# Generate documentation for each public module and package
for path in sorted(src.rglob('*.py')):
    if path.name == '__main__.py' or is_private(path):
        continue

    module_path = path.relative_to(src).with_suffix('')
    doc_path = path.relative_to(src).with_suffix('.md')
    full_doc_path = Path('reference', doc_path)

    parts = tuple(module_path.parts)
    if parts[-1] == '__init__':
        parts = parts[:-1]
        doc_path = doc_path.with_name('index.md')
        full_doc_path = full_doc_path.with_name('index.md')

    if not parts:
        continue

    nav[('reference', *parts)] = doc_path.as_posix()

    with mkdocs_gen_files.open(full_doc_path, 'w') as fd:
        ident = '.'.join((package_name, *parts))
        fd.write(f'# `{ident}`\n\n')
        fd.write(f'::: {ident}\n')
        fd.write('    options:\n')
        fd.write('      members: true\n')
        fd.write('      show_source: true\n\n')

    mkdocs_gen_files.set_edit_path(full_doc_path, path)

with mkdocs_gen_files.open('reference/SUMMARY.md', 'w') as nav_file:
    nav_file.writelines(nav.build_literate_nav())
