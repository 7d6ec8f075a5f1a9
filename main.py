from rich.pretty import pprint

from optionary import *

verbose = Cell(False)
levels = []
defines = {}

options = [
    Option("verbose", Kind.BOOL).bind_bool(verbose).set_alias("v").set_description("chatty output"),
    Option("level", Kind.INT_LIST).bind_int_list(levels).set_max_args(4).set_required(),
    Option("define", Kind.STRING_MAP).bind_string_map(defines).set_map_keys_to_lower(),
]


if __name__ == '__main__':
    sort(options)
    options[2].set_called("v").save("")
    options[1].set_called("level").save("1..3", "8")
    options[0].set_called("define").save("Mode=fast")
    for option in options:
        option.synopsis()
        option.check_required()
    pprint(options)
    try:
        options[1].set_called("level").save("9..2")
    except OptionException as error:
        trigger(error, shell=True, soft=True, prog="main")
