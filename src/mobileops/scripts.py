# mobileops/scripts.py
# Inline JavaScript emitted by the mobile skin

from __future__ import annotations

from markupsafe import Markup

from .html import inline_script

# Open sections while the full JavaScript is still loading. The previous
# sibling of a section block is always its heading.
INTERIM_TOGGLING_JS = """function mfTempOpenSection( id ) {
	var block = document.getElementById( "mf-section-" + id );
	block.className += " open-block";
	block.previousSibling.className += " open-block";
}"""

# Grade C browsers: swap lazy-image placeholders following <noscript> tags
# for real images.
GRADE_C_IMAGE_JS = """(window.NORLQ = window.NORLQ || []).push( function () {
	var ns, i, p, img;
	ns = document.getElementsByTagName( 'noscript' );
	for ( i = 0; i < ns.length; i++ ) {
		p = ns[i].nextSibling;
		if ( p && p.className && p.className.indexOf( 'lazy-image-placeholder' ) > -1 ) {
			img = document.createElement( 'img' );
			img.setAttribute( 'src', p.getAttribute( 'data-src' ) );
			img.setAttribute( 'width', p.getAttribute( 'data-width' ) );
			img.setAttribute( 'height', p.getAttribute( 'data-height' ) );
			img.setAttribute( 'alt', p.getAttribute( 'data-alt' ) );
			p.parentNode.replaceChild( img, p );
		}
	}
} );"""


def interim_toggling_support() -> Markup:
    """<script> defining mfTempOpenSection(id)."""
    return inline_script(INTERIM_TOGGLING_JS)


def grade_c_image_support() -> Markup:
    return inline_script(GRADE_C_IMAGE_JS)
