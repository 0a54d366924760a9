"""Length prefixers in ASCII, hex, binary, BCD, EBCDIC and BER-TLV form, fixed and variable."""