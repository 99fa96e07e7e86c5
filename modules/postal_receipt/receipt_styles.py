"""Stylesheet of the printed confirmation slip (screen and print media)."""

RECEIPT_STYLESHEET = """
  .form-container {
    border: 1px solid #000;
    padding: 20px;
    width: 148mm;
    margin: 0 auto;
    background-color: white;
    position: relative;
  }

  .tracking-number-line {
    display: flex;
    align-items: center;
    gap: 10px;
  }

  .dotted-line {
    flex-grow: 1;
    border-bottom: 1px dotted #000;
    height: 1.5em;
    min-width: 100px;
    display: inline-block;
  }

  .notification-section {
    margin: 2em 0;
    display: flex;
    align-items: center;
    gap: 10px;
  }

  .measurement-box {
    display: inline-block;
    border-bottom: 1px dotted #000;
    width: 30px;
    height: 1.5em;
    text-align: center;
    margin: 0 5px;
  }

  .stamp-circle {
    width: 60px;
    height: 60px;
    border: 1px solid #000;
    border-radius: 50%;
    position: absolute;
    bottom: 5px;
    right: 40px;
    margin: 25px 0;
  }

  .checkbox {
    font-size: 12px;
    margin-right: 5px;
  }

  .logo {
    text-align: right;
    margin-bottom: 10px;
  }

  .logo img {
    height: 40px;
  }

  @media print {
    .logo img {
      filter: brightness(0);
    }
  }

  .notification-box {
    border: 1px solid #000;
    padding: 10px;
    margin: 10px 0;
  }

  .notification-box .notification-section {
    margin: 0.5em 0;
  }

  .postal-details {
    display: flex;
    gap: 10px;
    margin: 5px 0;
  }

  .postal-details > div {
    flex: 1;
  }

  .postal-details > div:last-child {
    flex: 2;
  }

  .country-field {
    width: 50%;
  }

  .postal-label {
    font-size: 8px;
    color: #666;
    margin-top: 2px;
  }

  .bold {
    font-weight: bold;
  }

  .form-title {
    font-weight: bold;
    font-size: 14px;
    margin-bottom: 10px;
  }

  .form-row {
    margin-bottom: 10px;
  }

  .section-title {
    font-weight: bold;
  }

  .form-field {
    border-bottom: 1px dotted #000;
    min-height: 18px;
    margin: 5px 0;
  }

  .postal-code {
    letter-spacing: 1px;
  }

  .size-row span {
    margin-right: 20px;
  }

  .bottom-row {
    display: flex;
    justify-content: space-between;
    margin-top: 20px;
    position: relative;
  }

  .bottom-row > div {
    display: flex;
    align-items: center;
    gap: 5px;
  }

  .footer {
    font-size: 8px;
    margin-top: 20px;
    display: flex;
    justify-content: space-between;
    align-items: center;
  }

  .print-only {
    display: none;
  }

  @media print {
    body {
      background-color: white;
      padding: 20px;
      font-family: Arial, sans-serif;
    }
    .form-container {
      box-shadow: none;
      font-family: Arial, sans-serif;
      margin: 20mm auto;
    }
    .print-only {
      display: block;
    }
    @page {
      size: A4 portrait;
      margin: 0;
    }
  }
"""

__all__ = ["RECEIPT_STYLESHEET"]
