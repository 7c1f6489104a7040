from struct import unpack, pack

import pyaxmltree.constants as const


NS_ANDROID = '{http://schemas.android.com/apk/res/android}'


def complexToFloat(xcomplex):
    return float(xcomplex & const.COMPLEX_MANTISSA_MASK) * \
        const.RADIX_MULTS[(xcomplex >> const.COMPLEX_RADIX_SHIFT) & const.COMPLEX_RADIX_MASK]


def getPackage(i):
    if i >> 24 == const.ANDROID_PACKAGE_ID:
        return "android:"
    return ""


def format_value(_type, _data, lookup_string=lambda ix: "<string>"):
    """
    Render a typed value the way it is written in a manifest.

    :param _type: one of the TYPE_* constants
    :param _data: the 32 bit data of the value
    :param lookup_string: callable returning the pool string for an index,
        used for TYPE_STRING
    :return: str
    """
    if _type == const.TYPE_NULL:
        return ""

    elif _type == const.TYPE_STRING:
        return lookup_string(_data)

    elif _type == const.TYPE_REFERENCE:
        return "type1/{}".format(_data)

    elif _type in (const.TYPE_ATTRIBUTE, const.TYPE_DYNAMIC_ATTRIBUTE):
        return "?%s%08X" % (getPackage(_data), _data)

    elif _type == const.TYPE_DYNAMIC_REFERENCE:
        return "@%s%08X" % (getPackage(_data), _data)

    elif _type == const.TYPE_FLOAT:
        return "%f" % unpack("=f", pack("=L", _data))[0]

    elif _type == const.TYPE_INT_HEX:
        return "0x%x" % _data

    elif _type == const.TYPE_INT_BOOLEAN:
        if _data == 0:
            return "false"
        return "true"

    elif _type == const.TYPE_DIMENSION:
        return "%f%s" % (
            complexToFloat(_data),
            const.DIMENSION_UNITS[_data & const.COMPLEX_UNIT_MASK]
        )

    elif _type == const.TYPE_FRACTION:
        return "%f%s" % (
            complexToFloat(_data) * 100,
            const.FRACTION_UNITS[_data & const.COMPLEX_UNIT_MASK]
        )

    elif _type in (const.TYPE_INT_COLOR_ARGB8, const.TYPE_INT_COLOR_ARGB4):
        return "#%08X" % _data

    elif _type in (const.TYPE_INT_COLOR_RGB8, const.TYPE_INT_COLOR_RGB4):
        return "#%06X" % (_data & 0xFFFFFF)

    elif _type == const.TYPE_INT_DEC:
        return "%d" % _data

    return "<0x%X, type 0x%02X>" % (_data, _type)
