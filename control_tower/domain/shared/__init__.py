"""
Utilidades compartidas del dominio.

Primitivas de texto sin conocimiento del negocio de comercio exterior
(salvo las tablas de Incoterms, monedas y países de trade_terms).
Todas son totales: ante entradas sin coincidencia devuelven None, ""
o una lista vacía, nunca lanzan excepciones.

Uso:
    from control_tower.domain.shared.text_cleaner import normalize_whitespace, extract_after_label
    from control_tower.domain.shared.money import extract_number, parse_amount
    from control_tower.domain.shared.date_parser import convert_date_format, extract_dates
    from control_tower.domain.shared.validators import is_valid_swift_code
    from control_tower.domain.shared.trade_terms import extract_incoterm, normalize_country_name
    from control_tower.domain.shared.contact import extract_emails, extract_phone_numbers
"""
