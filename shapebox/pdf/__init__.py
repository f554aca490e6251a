"""PDF generation management."""

import io

import pydyf

from .. import DEFAULT_OPTIONS, VERSION
from ..draw import FONT_NAME, draw_operations
from ..logger import LOGGER, PROGRESS_LOGGER
from .stream import Stream

# PDF points per CSS pixel.
SCALE = 0.75

PDF_VERSION = b'1.7'


def generate_pdf(layout, compress=True):
    """Return a :class:`pydyf.PDF` with one page containing ``layout``.

    The page is the visual extent of the ellipse, including its stroke.

    """
    PROGRESS_LOGGER.info('Step 4 - Creating PDF')
    pdf = pydyf.PDF()
    resources = pydyf.Dictionary({
        'ExtGState': pydyf.Dictionary(),
        'Font': pydyf.Dictionary({
            FONT_NAME: pydyf.Dictionary({
                'Type': '/Font',
                'Subtype': '/Type1',
                'BaseFont': '/Helvetica',
            }),
        }),
    })
    pdf.add_object(resources)

    x, y, width, height = layout.box.visual_extent()
    if not width or not height:
        LOGGER.warning('Empty ellipse, generating an empty page')

    # Draw from the top-left corner of the visual extent
    stream = Stream(resources, compress=compress)
    stream.transform(
        a=SCALE, d=-SCALE, e=-x * SCALE, f=(y + height) * SCALE)
    pdf.add_object(stream)
    draw_operations(stream, layout.operations)

    pdf.add_page(pydyf.Dictionary({
        'Type': '/Page',
        'Parent': pdf.pages.reference,
        'MediaBox': pydyf.Array([0, 0, width * SCALE, height * SCALE]),
        'Contents': stream.reference,
        'Resources': resources.reference,
    }))
    pdf.info['Producer'] = pydyf.String(f'shapebox {VERSION}')
    return pdf


def write_pdf(layout, target=None, **options):
    """Paint ``layout`` in a PDF file.

    :type target:
        :class:`str`, :class:`pathlib.Path` or :term:`file object`
    :param target:
        A filename where the PDF file is generated, a file object, or
        :obj:`None`.
    :param options:
        The ``options`` parameter includes by default the
        :data:`shapebox.DEFAULT_OPTIONS` values.
    :returns:
        The PDF as :obj:`bytes` if ``target`` is not provided or
        :obj:`None`, otherwise :obj:`None` (the PDF is written to
        ``target``).

    """
    new_options = DEFAULT_OPTIONS.copy()
    new_options.update(options)
    options = new_options
    compress = not options['uncompressed_pdf']
    pdf = generate_pdf(layout, compress)

    if target is None:
        output = io.BytesIO()
        pdf.write(output, PDF_VERSION, compress=compress)
        return output.getvalue()

    if hasattr(target, 'write'):
        pdf.write(target, PDF_VERSION, compress=compress)
    else:
        with open(target, 'wb') as fd:
            pdf.write(fd, PDF_VERSION, compress=compress)
