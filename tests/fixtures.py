FIREFOX_SEQUENCE = [
    0.1321263101773572,
    0.03366887439746058,
    0.032596957696410134,
    0.9986575482138969,
]
FIREFOX_EXPECTED = [
    0.8479779907956815,
    0.13963871472821332,
    0.25068024611907636,
    0.6656237481612675,
    0.7381091878692425,
    0.8709382509549467,
    0.49171337524788294,
    0.6991749430716799,
    0.9530887478758369,
    0.781511163650037,
    0.699311162730038,
]

SAFARI_SEQUENCE = [
    0.8651485656540925,
    0.11315724215685208,
    0.3153950773233716,
    0.45825597860463274,
]
SAFARI_EXPECTED = [
    0.31143815234233363,
    0.6973996606199063,
    0.2146174701215342,
    0.098415677735185,
    0.6908723218385805,
    0.43568239375320583,
    0.5537079837658566,
    0.9190574467880481,
    0.14789834036423333,
    0.8477134504145751,
    0.8636173753361875,
    0.921914547452633,
    0.4377690900199249,
    0.759557924932666,
    0.5003933241991145,
    0.0589099881389864,
]

CHROME_SEQUENCE = [
    0.32096095967729477,
    0.3940071672626849,
    0.3363374923027722,
    0.7518761096243554,
    0.44201420586496387,
]
CHROME_EXPECTED = [
    0.8199006769436774,
    0.6250240806313154,
    0.9101975676132608,
    0.5889203398264599,
    0.5571161440436232,
    0.9619184649129092,
    0.8385620929536599,
    0.3822042053588621,
    0.5040552869863579,
    0.12014019399083042,
    0.44332968383610927,
    0.37830079319230936,
    0.542449069899975,
    0.0659240460476268,
    0.9589494984837686,
    0.007621633090565627,
    0.14119301022498787,
    0.9964718645470699,
    0.14527130036353442,
    0.6260597083849548,
    0.86354903522581,
    0.7245123107811886,
    0.6565323828155891,
    0.3636039851663503,
    0.5799453712253447,
]

NODE_V24_SEQUENCE = [
    0.01800425609760259,
    0.19267361208155598,
    0.9892770985784053,
    0.49553307275603264,
    0.7362624704291061,
]
NODE_V24_EXPECTED = [
    0.8664993194151147,
    0.5549329443482626,
    0.8879559862322086,
    0.9570142746667122,
    0.7514661363382521,
    0.9348208735728415,
]

NODE_V22_SEQUENCE = [
    0.36280726230126614,
    0.32726837947512855,
    0.22834780314989023,
    0.18295517908119385,
]
NODE_V22_EXPECTED = [
    0.8853110028441145,
    0.14326940888839124,
    0.035607792006009165,
    0.6491231376351401,
    0.3345277284146617,
    0.42618019812863417,
]

# Node v24, two consecutive 64-value caches
NODE_FIRST_CACHE_SEQUENCE = [
    0.777225464783239,
    0.15637962909874392,
    0.61479550021439,
    0.613383431187081,
]
NODE_FIRST_CACHE_EXPECTED = [
    0.13780690875659396,
    0.9982326337150321,
    0.004547103255256535,
    0.14287124304719512,
    0.07193734860746803,
    0.41988043371402806,
    0.2197922772380051,
    0.3919840116873258,
    0.872346223942074,
    0.8706850288116219,
]
NODE_SECOND_CACHE_SEQUENCE = [
    0.1155167115902066,
    0.2738831377473743,
    0.475867049008157,
    0.24131310081058077,
]
NODE_SECOND_CACHE_EXPECTED = [
    0.5567280997370845,
    0.09262950949369997,
    0.9774839147267224,
    0.07372009723227202,
    0.8903569034540151,
    0.2559913027687497,
    0.9357996349973149,
    0.10659667352144908,
    0.34537275726933636,
    0.23697119929732424,
    0.1411756579261214,
    0.4397982843668222,
    0.9628074927171562,
    0.15509374502364615,
]
