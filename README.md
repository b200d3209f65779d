# asterixkit

Decode ASTERIX (All Purpose Structured EUROCONTROL Surveillance Information
Exchange) binary data in pure Python, with no dependencies outside the
standard library.

An ASTERIX data block is laid out as:

- one octet of data category (CAT);
- two octets of length (LEN), counting CAT and LEN;
- one or more records, each made of a field specification (FSPEC) and the
  data fields that the FSPEC marks as present.

A User Application Profile (UAP) tells the decoder which data item belongs to
each field reference number (FRN), and how that item is shaped: fixed,
extended, explicit, repetitive, compound, random field sequencing, special
purpose or reserved expansion.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Defining a profile

Profiles are built from `DataField` descriptions in `asterixkit.uap`:

```python
from asterixkit.uap import DataField, FieldType, StandardUAP

profile = StandardUAP(
    name="cat255",
    category=255,
    items=(
        DataField(frn=1, data_item="I255/010", description="Data Source Identifier",
                  type=FieldType.FIXED, size=2),
        DataField(frn=2, data_item="I255/020", description="Target Report Descriptor",
                  type=FieldType.EXTENDED, primary_size=1, secondary_size=1),
    ),
)
```

`DataField` attributes by field type:

- `FieldType.FIXED`: `size`;
- `FieldType.EXTENDED`: `primary_size` and `secondary_size`;
- `FieldType.REPETITIVE`: `sub_item_size`;
- `FieldType.COMPOUND`: `compound`, a tuple of `DataField` subfields
  (fixed, extended, explicit or repetitive);
- `FieldType.EXPLICIT`, `FieldType.SP`, `FieldType.RE`: nothing, the length is
  read from the data;
- `FieldType.RFS`: nothing; the fields it carries are looked up by FRN in the
  profile and must be fixed fields.

A field marked `conditional=True` switches the rest of the profile: the most
significant bit of its first octet selects `StandardUAP.variants[0]` or
`variants[1]`, and the FRNs that follow are counted from that field.

`StandardUAP.field_for(frn)` returns the field at an FRN and raises
`DataFieldUnknownError` when there is none.

## Decoding a record

`Record.decode` reads one record and returns the number of bytes left after
it.

```python
from asterixkit.record import Record

record = Record()
unread = record.decode(bytes.fromhex("c008830100"), profile)
print(unread)             # 0
print(record.strings())   # ['FSPEC: c0', 'I255/010: 0883', 'I255/020: 0100']
print(record.payload())   # b'\xc0\x08\x83\x01\x00'
```

Each decoded `Item` has a `meta` (`frn`, `data_item`, `description`, `type`)
and its content in the attribute that matches its type: `fixed`, `extended`,
`explicit`, `repetitive`, `compound`, `rfs`, `sp` or `re`.

The field readers are available on their own too: `fspec_reader`,
`fspec_index`, `fixed_data_field_reader`, `extended_data_field_reader`,
`explicit_data_field_reader`, `repetitive_data_field_reader`,
`compound_data_field_reader`, `rfs_data_field_reader` and
`sp_and_re_data_field_reader`. Each takes a binary stream such as
`io.BytesIO`.

## Decoding data blocks

`DataBlock.decode` reads one CAT + LEN + records block and returns the number
of bytes that follow it. `WrapperDataBlock.decode` keeps reading blocks until
the data has been read in full. Both take a mapping from category number to
`StandardUAP` as `profiles`.

```python
from asterixkit.datablock import WrapperDataBlock

datagram = bytes.fromhex("ff0008c008830100")
wrapper = WrapperDataBlock()
wrapper.decode(datagram, profiles={255: profile})
for block in wrapper.data_blocks:
    print(block.category, block.length)   # 255 8
    for record_strings in block.strings():
        print(record_strings)
```

`DataBlock.payload()` returns the category octet, the two length octets and
each record's bytes as a list.

## Errors

Every decoding error derives from `asterixkit.errors.AsterixError`, which
carries `unread` (bytes left when decoding stopped) and `partial` (what had
been decoded of the failing field):

- `EndOfDataError`: no byte left where a field was expected;
- `UnexpectedEndError`: the data ended in the middle of a field;
  both derive from `TruncatedDataError`, itself an `EOFError`;
- `UndersizedError`: the data is shorter than the block's LEN;
- `CategoryUnknownError`: no profile for the block's category;
- `DataFieldUnknownError`: a field type that cannot be decoded there, or an
  FRN with no field in the profile.

Items and records decoded before the failure remain on the `Record`,
`DataBlock` or `WrapperDataBlock` object.

## Helpers

- `asterixkit.complement.two_complement16` and `two_complement32` read signed
  values of any bit width out of unsigned integers.
- `asterixkit.lengthwidth.lookup_length_width(code, version=2)` maps a 4-bit
  length/width code to a `LengthWidth` text pair, for table version 1 or 2.

## Mode S Comm-B registers

`asterixkit.commbds.bds.decode_bds` takes 8 bytes (7 bytes of MB data and the
register number) and returns a `Bds` holding the decoded register:

- `40`: selected vertical intention (`Code40`);
- `50`: track and turn report (`Code50`);
- `60`: heading and speed report (`Code60`);
- `00`: `code00` is `"Not valid"`;
- any other register: `code_not_processed` holds the MB data as upper-case hex.

```python
from asterixkit.commbds.bds import decode_bds

bds = decode_bds(bytes.fromhex("C0FC0F8F30F60F60"))
print(bds.transponder_register_number)   # '60'
print(bds.code60.magnetic_heading)        # -177
```

The register decoders can also be called directly with 7 bytes:
`decode_code40`, `decode_code50` and `decode_code60` in
`asterixkit.commbds.bdscode`.

## What the package does not do

- It ships no ready-made profiles for the ASTERIX categories: every
  `StandardUAP` has to be defined by the caller.
- It does not convert decoded records into JSON, XML or other named values;
  items are kept as raw bytes.
- It has no command-line tool and does not read files or network sockets;
  it decodes the bytes it is given.