"""HTML rendering of the postal confirmation slip ("potwierdzenie nadania")."""
from __future__ import annotations

from html import escape

from .models import Address, Notification, ParcelSize, RecipientAddress, ShipmentForm

CHECKED = "☒"
UNCHECKED = "☐"
DEFAULT_LOGO_SRC = "/logo.svg"


def _box(checked: bool) -> str:
    state = "checkbox checked" if checked else "checkbox"
    return f"<span class='{state}'>{CHECKED if checked else UNCHECKED}</span>"


def _field(value: str) -> str:
    return f"<div class='form-field'>{escape(value)}</div>"


def _address_block(title: str, address: Address) -> str:
    line2 = _field(address.address_line2) if address.address_line2 else ""
    country = ""
    if isinstance(address, RecipientAddress):
        country = f"""
        <div class='country-field'>
            {_field(address.country or '')}
            <div class='postal-label'>Kraj</div>
        </div>"""
    return f"""
    <div class='form-row'>
        <div class='section-title'>{title}</div>
        {_field(address.name)}
        {_field(address.address_line1)}
        {line2}
        <div class='postal-details'>
            <div>
                <div class='form-field'><span class='postal-code'>{escape(address.postal_code)}</span></div>
                <div class='postal-label'>Kod pocztowy</div>
            </div>
            <div>
                {_field(address.city)}
                <div class='postal-label'>Miejscowość</div>
            </div>
        </div>{country}
    </div>"""


def _notification_block(key: str, caption: str, notification: Notification) -> str:
    contact = escape(notification.contact) if notification.enabled else ""
    return f"""
    <div class='notification-box' id='{key}-notification'>
        <div class='form-row'>{_box(notification.enabled)} {caption}</div>
        <div class='form-row notification-section'>
            <span>SMS/E-MAIL:</span>
            <div class='dotted-line' id='{key}-contact'>{contact}</div>
        </div>
    </div>"""


def _size_row(selected: ParcelSize) -> str:
    boxes = "".join(
        f"<span>{_box(size == selected)} {size.value}</span>" for size in ParcelSize
    )
    return f"<div class='form-row size-row'>{boxes}<span>Format</span></div>"


def render_receipt(form: ShipmentForm, logo_src: str = DEFAULT_LOGO_SRC) -> str:
    """Return the confirmation slip for ``form`` as an HTML fragment."""

    options = form.options
    return f"""
<div class='form-container'>
    <div class='logo'><img src='{escape(logo_src)}' alt='Poczta Polska' /></div>
    <div class='form-title'>POTWIERDZENIE NADANIA</div>
    <div class='form-row tracking-number-line'>
        <span>Przesyłki poleconej nr:</span>
        <div class='dotted-line' id='tracking-number'>{escape(form.tracking_number)}</div>
    </div>
    {_address_block('NADAWCA:', form.sender)}
    {_notification_block('sender', 'Potwierdzenie doręczenia albo zwrotu dla nadawcy', form.sender_notification)}
    {_address_block('ADRESAT:', form.recipient)}
    {_notification_block('recipient', 'Awizo dla adresata', form.recipient_notification)}
    <div class='form-row'>
        {_box(options.delivery_confirmation)} Potwierdzenie odbioru
        &nbsp;&nbsp;&nbsp;&nbsp;
        {_box(options.priority)} Priorytetowa
    </div>
    {_size_row(options.size)}
    <div class='bottom-row'>
        <div><span>Masa</span><span class='measurement-box'></span><span>kg</span><span class='measurement-box'></span><span>g</span></div>
        <div><span>Opłata</span><span class='measurement-box'></span><span>zł</span><span class='measurement-box'></span><span>gr</span></div>
        <div class='stamp-circle'></div>
    </div>
    <div class='footer'>
        <span>PP S.A. nr <span class='bold'>11</span></span>
        <span>Wydział Poligrafii OI Wrocław 2024</span>
    </div>
</div>
"""


__all__ = ["render_receipt", "CHECKED", "UNCHECKED", "DEFAULT_LOGO_SRC"]
