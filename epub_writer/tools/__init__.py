from .xml import indent, to_xml_string
