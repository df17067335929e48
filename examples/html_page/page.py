# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlPage - Example cover class built on HtmlObject.

A didactic example showing how to assemble a complete document with
spawn_child() chains and write it to disk.
"""

from __future__ import annotations

from pathlib import Path

from genro_htmlobject import HtmlObject


class HtmlPage:
    """An HTML page with separate head and body elements.

    Example:
        >>> page = HtmlPage(title='My Page')
        >>> page.body.spawn_child('div', {'id': 'main'}).spawn_child('p').set_content('Hello')
        >>> html = page.to_html()
    """

    def __init__(self, title: str = '', xhtml: bool = False):
        self.html = HtmlObject('html', xhtml=xhtml)
        self.head = self.html.spawn_child('head')
        self.head.spawn_child('meta', {'charset': 'utf-8'})
        if title:
            self.head.spawn_child('title').set_content(title)
        self.body = self.html.spawn_child('body')

    def to_html(self, filename: str | None = None, output_dir: str | None = None) -> str:
        """Generate the document.

        Args:
            filename: If provided, save to output_dir/filename
            output_dir: Directory to save to (default: current directory)

        Returns:
            HTML string, or path if filename was provided
        """
        html_content = '<!DOCTYPE html>' + self.html.render()

        if filename:
            output_path = Path(output_dir) if output_dir else Path.cwd()
            output_path.mkdir(exist_ok=True)
            output_path = output_path / filename
            output_path.write_text(html_content)
            return str(output_path)

        return html_content


if __name__ == '__main__':
    page = HtmlPage(title='Genro HtmlObject')

    main = page.body.spawn_child('div', {'id': 'main'}).add_class('container')
    main.spawn_child('h1').set_content('Welcome')

    menu = main.spawn_child('ul').add_class('menu')
    for label in ('Home', 'Docs', 'About'):
        menu.spawn_child('li').data('section', label.lower()).set_content(label)

    main.spawn_child('hr')
    main.spawn_child('img', {'src': 'logo.png', 'alt': 'logo'})

    print(page.to_html())
