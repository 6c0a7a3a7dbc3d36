from radiosonde_parser import parser, pq_conv
from radiosonde_parser.tokenizer import split_message_parts
import json

bulletin = """
TTAA 51231 03808 99996 07819 17005 00057 00057 05008 85440 03256 22521
70012 07166 26032 50560 19363 27545 40727 30962 28060 30929 43366 28581
25050 51566 28576 20195 56362 28563 88241 53565 29086 77217 28593 41020
31313 58708 82302=
TTBB 51238 03808 00996 07819 11995 08018 22850 03256 33700 07166
21212 00996 17005 11850 22521 22700 26032 33217 28593
31313 58708 82302=
"""

ttaa_text, ttbb_text = split_message_parts(bulletin)
result = parser.decode_sounding(ttaa_text, ttbb_text)
for error in result.errors:
    print(f"Warning: {error}")
print(json.dumps(result.profile.to_dict(), indent=4))

with open('temp.json', 'w') as decoded_profile:
    json.dump(result.profile.to_dict(), decoded_profile, indent=4)

print(pq_conv.profile_to_frame(result.profile))
