# slowfetch/art/logos.py
# Built-in art. `{n}` switches to palette color n for the characters after it.

DEFAULT_LOGO = {
    "wide": r"""
{1}                  .-~~~~~~~~-.
{2}               .-'   .-~~-.   '-.
{3}              /    .'  __  '.    \
{4}             |    /  .'  '.  \    |        {7}\    /
{5}             |   |  |  ()  |  |   |         {7}o  o
{6}              \   '. '.__.' .'   /          {7}|  |
{8}       ________'-._ '-.__.-' _.-'__________/   /
{8}      (_______________________________________/
{9}           s   l   o   w   f   e   t   c   h
""",
    "medium": r"""
{1}            .-~~~~~~-.
{2}          .'  .-~~-.  '.
{3}         /   /  ()  \   \      {7}\  /
{4}        |   |  '--'  |   |      {7}oo
{5}         \   '.____.'   /       {7}||
{6}    ______'-.________.-'_______/ /
{8}   (___________________________/
{9}         s l o w f e t c h
""",
    "narrow": r"""
{1}     .-~~-.
{2}    / .--. \   {7}\/
{3}   | | () | |  {7}oo
{4}    \ '--' /   {7}||
{6}  ___'-..-'___/ /
{8} (____________/
{9}   slowfetch
""",
}

# Ordered: first matching pattern wins. Patterns are regexes searched in the
# lowercased OS name.
OS_MATCHERS = (
    (("arch",), "arch"),
    (("cachyos", "cachy"), "cachyos"),
    (("fedora",), "fedora"),
    (("ubuntu",), "ubuntu"),
    (("nixos", r"\bnix\b"), "nixos"),
    (("debian",), "debian"),
)

OS_LOGOS = {
    "arch": {
        "full": r"""
{6}                  -`
{6}                 .o+`
{6}                `ooo/
{6}               `+oooo:
{6}              `+oooooo:
{6}              -+oooooo+:
{6}            `/:-:++oooo+:
{6}           `/++++/+++++++:
{6}          `/++++++++++++++:
{6}         `/+++{7}ooooooooooooo{6}/`
{7}        ./ooosssso++osssssso+`
{7}       .oossssso-````/ossssss+`
{7}      -osssssso.      :ssssssso.
{7}     :osssssss/        osssso+++.
{7}    /ossssssss/        +ssssooo/-
{7}  `/ossssso+/:-        -:/+osssso+-
{7} `+sso+:-`                 `.-/+oso:
{7}`++:.                           `-/+/
{7}.`                                 `/
""",
        "smol": r'''
{6}      /\
{6}     /  \
{6}    /\   \
{7}   /      \
{7}  /   ,,   \
{7} /   |  |  -\
{7}/_-''    ''-_\
''',
    },
    "cachyos": {
        "full": r"""
{4}           .-------------------------:
{4}          .+=========================.
{4}         :++===++==================-       {5}:++-
{4}        :*++====+++++=============-        {5}.==:
{4}       -*+++=====+***++==========:
{4}      =*++++========------------:
{4}     =*+++++=====-                     {5}...
{4}   .+*+++++=-===:                    {5}.=+++=:
{4}  :++++=====-==:                     {5}-*****+
{4} :++========-=.                      {5}.=+**+.
{4}.+==========-.                          {5}.
{4} :+++++++====-                                {5}.--==-.
{4}  :++==========.                             {5}:+++++++:
{4}   .-===========.                            {5}=*****+*+
{4}    .-===========:                           {5}.+*****+:
{4}      -=======++++:::::::::::::::::::::::::-:  {5}.---:
{4}       :======++++====+++******************=.
{4}        :=====+++==========++++++++++++++*-
{4}         .====++==============++++++++++*-
{4}          .===+==================+++++++:
{4}           .-=======================+++:
{4}             ..........................
""",
        "smol": r"""
{4}   /''''''''''''/
{4}  /''''''''''''/
{4} /''''''/
{4}/''''''/      {5}o
{4}\......\
{4} \......\''''''/
{4}  \............/
""",
    },
    "fedora": {
        "full": r"""
{7}             .',;::::;,'.
{7}         .';:cccccccccccc:;,.
{7}      .;cccccccccccccccccccccc;.
{7}    .:cccccccccccccccccccccccccc:.
{7}  .;ccccccccccccc;{8}.:dddl:.{7};ccccccc;.
{7} .:ccccccccccccc;{8}OWMKOOXMWd{7};ccccccc:.
{7}.:ccccccccccccc;{8}KMMc{7};cc;{8}xMMc{7};ccccccc:.
{7},cccccccccccccc;{8}MMM.{7};cc;{8};WW:{7};cccccccc,
{7}:cccccccccccccc;{8}MMM.{7};cccccccccccccccc:
{7}:ccccccc;{8}oxOOOo{7};{8}MMM0OOk.{7};cccccccccccc:
{7}cccccc;{8}0MMKxdd:{7};{8}MMMkddc.{7};cccccccccccc;
{7}ccccc;{8}XM0'{7};cccc;{8}MMM.{7};cccccccccccccccc'
{7}ccccc;{8}MMo{7};ccccc;{8}MMW.{7};ccccccccccccccc;
{7}ccccc;{8}0MNc.{7}ccc{8}.xMMd{7};ccccccccccccccc;
{7}cccccc;{8}dNMWXXXWM0:{7};cccccccccccccc:,
{7}cccccccc;{8}.:odl:.{7};cccccccccccccc:,.
{7}:cccccccccccccccccccccccccccc:'.
{7}.:cccccccccccccccccccccc:;,..
""",
        "smol": r"""
{7}        ,'''''.
{7}       |   ,.  |
{7}       |  |  '_'
{7}  ,....|  |..
{7}.'  ,_;|  ..'
{7}|  |   |  |
{7}|  ',_,'  |
{7} '.     ,'
{7}   '''''
""",
    },
    "ubuntu": {
        "full": r"""
{1}            .-/+oossssoo+/-.
{1}        `:+ssssssssssssssssss+:`
{1}      -+ssssssssssssssssssyyssss+-
{1}    .ossssssssssssssssss{8}dMMMNy{1}sssso.
{1}   /sssssssssss{8}hdmmNNmmyNMMMMh{1}ssssss/
{1}  +sssssssss{8}hm{1}yd{8}MMMMMMMNddddy{1}ssssssss+
{1} /ssssssss{8}hNMMM{1}yh{8}hyyyyhmNMMMNh{1}ssssssss/
{1}.ssssssss{8}dMMMNh{1}ssssssssss{8}hNMMMd{1}ssssssss.
{1}+ssss{8}hhhyNMMNy{1}ssssssssssss{8}yNMMMy{1}sssssss+
{1}oss{8}yNMMMNyMMh{1}ssssssssssssss{8}hmmmh{1}ssssssso
{1}oss{8}yNMMMNyMMh{1}ssssssssssssss{8}hmmmh{1}ssssssso
{1}+ssss{8}hhhyNMMNy{1}ssssssssssss{8}yNMMMy{1}sssssss+
{1}.ssssssss{8}dMMMNh{1}ssssssssss{8}hNMMMd{1}ssssssss.
{1} /ssssssss{8}hNMMM{1}yh{8}hyyyyhdNMMMNh{1}ssssssss/
{1}  +sssssssss{8}dm{1}yd{8}MMMMMMMMddddy{1}ssssssss+
{1}   /sssssssssss{8}hdmNNNNmyNMMMMh{1}ssssss/
{1}    .ossssssssssssssssss{8}dMMMNy{1}sssso.
{1}      -+sssssssssssssssss{8}yyy{1}ssss+-
{1}        `:+ssssssssssssssssss+:`
{1}            .-/+oossssoo+/-.
""",
        "smol": r"""
{1}         _
{1}     ---(_)
{1} _/  ---  \
{1}(_) |   |
{1}  \  --- _/
{1}     ---(_)
""",
    },
    "nixos": {
        "full": r"""
{7}          ::::.    {6}':::::     ::::'
{7}          ':::::    {6}':::::.  ::::'
{7}            :::::     {6}'::::.:::::
{7}      .......:::::..... {6}::::::::
{7}     ::::::::::::::::::. {6}::::::    {7}::::.
{7}    ::::::::::::::::::::: {6}:::::.  {7}.::::'
{6}           .....           ::::' {7}:::::'
{6}          :::::            '::' {7}:::::'
{6} ........:::::               ' {7}:::::::::::.
{6}:::::::::::::                 {7}:::::::::::::
{6} ::::::::::: {7}..              {7}:::::
{6}     .::::: {7}.:::            {7}:::::
{6}    .:::::  {7}:::::          {7}'''''    {6}.....
{6}    :::::   {7}':::::.  {6}......:::::::::::::'
{6}     :::     {7}::::::. {6}':::::::::::::::::'
{7}            .:::::::: {6}'::::::::::
{7}           .::::''::::.     {6}'::::.
{7}          .::::'   ::::.     {6}'::::.
{7}         .::::      ::::      {6}'::::.
""",
        "smol": r"""
{7}  \\  \\ //
{7} ==\\__\\/ //
{7}   //   \\//
{7}==//     //==
{7} //\\___//
{7}// /\\  \\==
{7}  // \\  \\
""",
    },
    "debian": {
        "full": r'''
{8}       _,met$$$$$gg.
{8}    ,g$$$$$$$$$$$$$$$P.
{8}  ,g$$P"     """Y$$.".
{8} ,$$P'              `$$$.
{8}',$$P       ,ggs.     `$$b:
{8}`d$$'     ,$P"'   {1}.{8}    $$$
{8} $$P      d$'     {1},{8}    $$P
{8} $$:      $$.   {1}-{8}    ,d$$'
{8} $$;      Y$b._   _,d$P'
{8} Y$$.    {1}`.{8}`"Y$$$$P"'
{8} `$$b      {1}"-.__
{8}  `Y$$
{8}   `Y$$.
{8}     `$$b.
{8}       `Y$$b.
{8}          `"Y$b._
{8}              `"""
''',
        "smol": r"""
{1}  _____
{1} /  __ \
{1}|  /    |
{1}|  \___-
{1}-_
{1}  --_
""",
    },
}
