"""Unsorted input set shared by the sorting benchmarks."""

DATA_SIZE = 2048

INPUT_DATA: tuple[int, ...] = (
    89_400_484, 976_015_092, 1_792_756_324, 721_524_505, 1_214_379_246,
    3_794_415, 402_845_420, 2_126_940_990, 1_611_680_320, 786_566_648,
    754_215_794, 1_231_249_235, 284_658_041, 137_796_456, 2_041_942_843,
    329_767_814, 1_255_524_953, 465_119_445, 1_731_949_250, 301_663_421,
    1_335_861_008, 452_888_789, 14_125_900, 1_231_149_357, 2_002_881_120,
    730_845_665, 1_913_581_092, 1_275_331_596, 843_738_737, 1_931_282_005,
    1_492_488_573, 490_920_543, 2_066_865_713, 25_885_333, 238_278_880,
    1_898_582_764, 250_731_366, 1_612_593_993, 637_659_983, 1_388_759_892,
    916_073_297, 1_075_762_632, 675_549_432, 937_987_129, 1_417_415_680,
    1_508_705_426, 1_663_890_071, 1_746_476_698, 686_797_873, 2_109_530_615,
    1_459_500_136, 324_215_873, 1_881_253_854, 1_496_277_718, 810_387_144,
    1_212_974_417, 1_020_037_994, 585_169_793, 2_017_191_527, 556_328_195,
    1_160_036_198, 1_391_095_995, 1_223_583_276, 1_094_283_114, 436_580_096,
    190_215_907, 603_159_718, 1_513_255_537, 1_631_935_240, 1_440_145_706,
    1_303_736_105, 806_638_567, 1_100_041_120, 1_185_825_535, 1_414_141_069,
    2_014_090_929, 419_476_096, 1_273_955_724, 175_753_599, 1_223_475_486,
    574_236_644, 2_046_759_770, 492_507_266, 1_721_767_511, 726_141_970,
    1_256_152_080, 2_029_909_894, 1_382_429_941, 1_939_683_211, 791_188_057,
    519_699_747, 1_051_184_301, 1_962_689_485, 706_913_763, 1_776_471_922,
    672_906_535, 2_005_817_027, 1_274_190_723, 2_119_425_672, 835_063_788,
    421_198_539, 1_169_327_477, 2_064_145_552, 1_396_662_140, 1_218_522_465,
    2_105_638_337, 754_247_044, 2_143_968_639, 1_395_289_708, 1_750_443_194,
    1_412_540_552, 170_281_493, 389_233_190, 448_284_065, 240_618_723,
    2_145_930_822, 1_846_605_728, 1_353_999_206, 140_536_987, 1_821_559_709,
    619_972_089, 1_514_278_798, 750_919_339, 2_143_343_312, 304_427_548,
    545_066_288, 1_946_004_194, 1_538_069_400, 1_904_770_864, 924_541_465,
    567_779_677, 893_302_687, 1_239_665_569, 1_157_666_831, 2_105_814_934,
    1_505_475_223, 1_636_203_720, 9_736_243, 518_073_650, 1_063_743_848,
    1_029_176_122, 215_018_112, 1_073_871_430, 1_858_933_377, 866_478_506,
    1_491_477_359, 477_407_584, 895_562_064, 954_441_852, 638_167_485,
    1_550_159_640, 614_612_685, 1_453_397_990, 1_334_857_284, 683_536_723,
    168_771_888, 481_561_285, 755_798_022, 2_016_161_810, 1_162_679_490,
    619_428_858, 1_390_306_889, 256_860_662, 365_275_089, 1_322_281_086,
    1_134_185_180, 1_302_724_177, 621_921_213, 837_554_186, 1_711_761_015,
    754_896_618, 1_723_143_470, 978_247_260, 1_548_804_416, 598_016_845,
    1_631_405_417, 790_929_190, 1_602_517_354, 770_957_259, 198_186_681,
    1_256_015_513, 2_126_029_304, 135_012_885, 583_112_200, 2_118_203_528,
    1_834_388_383, 866_964_848, 1_695_191_950, 745_183_293, 1_143_511_498,
    1_112_731_797, 478_721_193, 1_202_162_389, 991_159_735, 1_952_364_329,
    519_344_323, 1_667_102_296, 770_412_991, 548_632_788, 714_042_223,
    1_674_045_273, 1_471_598_258, 1_286_989_824, 1_590_771_096, 308_832_070,
    959_354_209, 72_802_865, 670_621_648, 269_167_950, 1_598_436_917,
    2_023_498_746, 1_198_213_061, 2_006_856_683, 1_029_832_956, 1_719_009_954,
    1_198_254_803, 1_188_748_563, 1_989_240_516, 927_524_181, 1_711_765_426,
    1_394_929_399, 769_005_536, 2_047_006_719, 1_915_435_344, 618_681_206,
    1_431_814_151, 42_021_322, 1_106_678_970, 107_160_610, 1_199_317_660,
    185_592_115, 1_870_214_195, 205_008_108, 1_834_318_089, 948_686_793,
    946_311_527, 1_262_399_341, 131_405_125, 1_321_897_861, 1_459_138_745,
    821_481_684, 852_388_468, 603_907_009, 20_643_769, 1_737_931_879,
    37_141_933, 2_088_576_982, 366_700_722, 1_761_289_401, 625_991_894,
    741_078_359, 817_417_567, 969_305_448, 1_152_416_171, 1_101_933_540,
    399_456_957, 2_074_896_270, 1_971_484_382, 747_592_875, 1_160_333_307,
    1_738_353_358, 2_113_434_968, 1_896_952_705, 1_908_093_581, 1_155_544_307,
    117_766_047, 2_034_767_768, 1_316_120_929, 1_507_433_029, 2_045_407_567,
    765_386_206, 1_031_625_002, 1_220_915_309, 325_667_019, 1_916_602_098,
    16_411_608, 47_463_938, 1_379_995_885, 1_221_108_420, 721_046_824,
    1_431_492_783, 1_569_479_928, 909_415_369, 204_514_903, 933_673_987,
    1_565_700_239, 341_674_967, 602_907_378, 5_309_142, 849_489_374,
    180_599_971, 1_480_437_960, 532_467_027, 1_958_396_887, 106_223_060,
    1_025_117_441, 935_689_637, 1_752_088_215, 1_704_561_346, 1_568_395_337,
    1_868_289_345, 569_949_159, 1_045_658_065, 274_746_405, 890_461_390,
    507_848_158, 793_505_636, 460_893_030, 1_179_525_294, 388_855_203,
    1_113_693_824, 13_887_419, 1_909_681_194, 1_082_499_152, 1_466_632_447,
    1_281_443_423, 612_289_854, 373_305_330, 568_652_142, 1_383_640_563,
    1_073_695_485, 745_777_837, 624_939_139, 1_289_308_008, 1_928_550_562,
    148_113_917, 462_743_614, 1_826_880_531, 1_571_598_133, 1_415_390_230,
    1_480_273_562, 1_331_593_955, 540_006_359, 261_556_590, 1_690_167_792,
    283_430_575, 1_194_709_162, 1_781_233_744, 649_754_857, 1_434_046_375,
    1_135_793_759, 932_423_857, 1_170_759_710, 1_048_943_084, 692_845_661,
    1_620_562_432, 2_036_750_157, 270_410_557, 617_995_659, 1_347_284_277,
    1_771_614_266, 30_992_839, 655_445_946, 22_762_734, 1_695_617_313,
    867_628_573, 1_577_034_674, 227_870_124, 2_063_408_339, 1_512_163_910,
    787_913_688, 1_758_748_737, 1_553_547_892, 2_072_440_819, 632_611_704,
    873_623_623, 2_097_057_488, 1_879_635_915, 1_404_727_477, 1_840_896_199,
    1_609_955_669, 186_112_992, 196_401_930, 130_001_148, 814_302_898,
    1_420_810_050, 226_906_236, 1_435_859_758, 221_330_186, 329_049_266,
    820_933_470, 260_792_255, 1_401_058_771, 210_908_782, 1_774_652_096,
    886_978_116, 1_807_085_904, 508_041_515, 767_233_910, 26_687_179,
    318_750_634, 910_677_024, 117_260_224, 2_074_840_378, 301_350_822,
    464_795_711, 2_053_899_162, 1_335_298_265, 737_518_341, 777_433_215,
    1_147_341_731, 1_981_481_446, 1_628_389_501, 1_537_459_540, 1_121_432_739,
    1_392_162_662, 1_800_522_575, 644_293_952, 1_273_223_611, 1_906_345_724,
    28_256_901, 1_467_376_771, 372_465_453, 78_348_530, 135_678_410,
    1_061_864_942, 260_267_972, 1_184_561_748, 287_497_702, 1_154_842_325,
    1_629_914_848, 2_084_953_915, 799_717_076, 1_382_484_003, 2_045_821_218,
    933_603_111, 84_924_801, 892_939_912, 279_252_402, 651_750_790,
    238_566_180, 942_977_997, 1_822_612_008, 1_849_675_857, 939_497_524,
    436_630_343, 549_253_917, 1_028_937_430, 579_174_666, 2_124_749_673,
    880_456_526, 1_451_442_832, 1_350_653_461, 1_546_104_436, 858_045_289,
    2_129_513_521, 1_181_191_604, 727_587_915, 1_619_598_456, 969_076_419,
    1_212_628_403, 1_361_078_114, 368_541_415, 333_906_659, 41_714_278,
    1_390_274_260, 1_563_717_683, 973_769_771, 1_078_197_595, 918_378_387,
    1_672_192_305, 1_094_531_762, 92_620_223, 2_125_958_841, 1_620_803_320,
    915_948_205, 174_965_839, 27_377_406, 435_236_973, 1_038_830_638,
    1_834_161_399, 305_750_851, 330_474_090, 730_422_541, 1_634_445_325,
    840_106_059, 767_880_329, 109_526_756, 2_027_814_180, 367_923_081,
    1_983_379_601, 1_293_091_635, 705_851_791, 226_723_092, 1_067_775_613,
    2_082_760_612, 951_663_731, 260_670_135, 1_111_213_862, 1_891_630_185,
    1_379_259_015, 176_024_101, 594_814_862, 1_870_859_970, 1_689_946_986,
    1_290_969_161, 244_975_305, 1_296_857_499, 1_811_088_032, 1_873_900_475,
    1_949_896_838, 1_907_793_490, 592_006_699, 1_312_471_120, 509_744_705,
    869_853_078, 70_894_786, 503_368_137, 1_686_479_103, 1_602_967_659,
    1_214_950_832, 1_131_661_227, 768_185_796, 592_234_826, 1_727_583_308,
    949_222_447, 1_760_851_607, 487_888_229, 1_614_780_688, 1_618_378_831,
    602_368_560, 2_028_116_487, 183_679_578, 1_561_251_584, 986_240_059,
    1_525_451_290, 977_907_387, 432_609_664, 1_528_031_307, 116_766_659,
    987_761_406, 1_630_293_700, 90_063_199, 114_202_152, 543_952_312,
    855_107_605, 812_328_969, 88_823_122, 1_092_881_031, 304_131_252,
    1_505_022_272, 894_769_708, 1_849_495_275, 1_607_515_830, 1_032_748_996,
    472_872_107, 1_593_359_038, 1_027_760_887, 1_074_205_225, 1_657_001_479,
    1_524_491_858, 387_061_281, 107_095_939, 1_038_018_856, 798_445_606,
    1_486_594_282, 1_878_434_988, 1_558_695_709, 2_033_003_588, 373_226_849,
    2_133_066_804, 399_991_238, 1_132_597_050, 1_965_358_941, 1_551_661_799,
    3_522_194, 935_939_763, 2_070_467_093, 500_734_709, 533_101_409,
    1_068_798_385, 998_931_662, 1_500_102_591, 779_093_898, 66_579_049,
    1_121_960_111, 749_415_493, 502_323_961, 538_932_155, 259_768_753,
    753_296_935, 87_897_457, 539_429_964, 1_675_300_017, 1_232_992_084,
    420_106_224, 1_685_350_721, 346_598_567, 1_610_244_183, 1_597_506_096,
    1_079_859_867, 944_382_193, 1_770_497_338, 764_935_753, 1_776_794_410,
    866_854_601, 365_854_486, 304_211_060, 344_860_208, 1_361_012_693,
    1_450_892_344, 622_170_346, 70_003_859, 1_681_866_717, 435_288_306,
    687_941_098, 308_700_094, 1_367_731_096, 1_834_285_819, 255_226_842,
    193_873_940, 1_833_603_743, 848_402_819, 152_273_285, 231_181_585,
    1_754_447_491, 1_838_218_199, 834_410_115, 229_905_664, 2_052_321_529,
    338_532_526, 77_482_422, 12_937_811, 35_859_252, 1_645_969_422,
    1_501_181_424, 438_711_458, 1_496_078_411, 419_109_342, 1_455_756_978,
    1_234_944_834, 1_287_171_290, 470_090_505, 1_900_162_831, 1_130_850_177,
    1_772_760_484, 381_571_915, 1_605_369_007, 514_914_429, 994_291_574,
    1_502_557_594, 1_099_847_920, 1_627_355_806, 1_148_699_143, 1_519_017_268,
    946_489_895, 106_595_511, 921_573_402, 181_567_810, 1_575_380_740,
    1_719_573_683, 1_561_730_727, 1_920_182_565, 1_510_133_268, 1_102_603_775,
    1_175_885_101, 802_730_854, 185_979_744, 1_058_937_717, 1_716_853_034,
    31_596_852, 462_857_778, 1_335_652_095, 47_036_070, 178_901_145,
    1_399_673_078, 222_529_745, 128_036_841, 1_708_126_014, 923_768_127,
    1_980_923_963, 1_413_860_940, 1_382_551_511, 208_160_226, 1_892_370_478,
    2_091_626_028, 1_793_190_956, 1_417_601_340, 515_811_664, 2_076_612_603,
    993_525_189, 1_127_173_529, 245_334_962, 134_453_363, 1_206_302_514,
    1_344_125_357, 1_139_159_604, 651_536_866, 22_136_821, 1_536_213_818,
    2_143_324_534, 879_878_312, 1_944_679_691, 119_285_206, 832_081_018,
    1_566_878_909, 876_130_333, 656_954_306, 226_726_100, 937_976_428,
    1_202_009_920, 1_938_258_683, 2_014_129_292, 1_274_436_639, 1_102_423_908,
    1_485_740_112, 879_552_408, 1_712_269_139, 650_513_248, 1_068_587_688,
    434_850_545, 382_422_699, 919_736_727, 2_022_291_557, 1_319_798_607,
    2_139_976_479, 772_059_719, 1_033_910_502, 1_120_963_974, 340_231_765,
    1_471_131_758, 1_767_380_006, 47_452_797, 1_313_871_880, 399_114_073,
    1_462_921_857, 671_848_647, 31_574_181, 230_340_298, 239_990_424,
    590_690_783, 1_714_295_540, 833_019_845, 398_244_682, 522_160_389,
    900_852, 1_045_627_895, 1_545_555_937, 226_986_415, 208_433_088,
    1_502_480_836, 1_611_500_622, 1_933_923_245, 1_588_715_179, 1_655_277_291,
    1_749_972_876, 1_386_258_142, 935_490_932, 173_822_937, 702_380_578,
    348_131_466, 81_402_251, 875_481_479, 72_939_206, 2_033_828_953,
    1_302_272_656, 64_795_664, 2_010_549_018, 1_652_108_025, 58_217_952,
    1_871_684_562, 190_536_346, 244_709_448, 949_010_757, 320_137_025,
    729_474_445, 133_790_520, 740_536_012, 316_479_300, 1_191_513_656,
    1_802_197_319, 785_398_708, 1_816_641_611, 2_052_328_978, 930_367_387,
    1_374_125_186, 303_845_878, 852_835_634, 454_359_988, 2_131_761_201,
    1_757_028_186, 536_063_430, 1_765_354_961, 726_869_128, 1_209_784_819,
    1_790_557_628, 783_427_298, 2_094_085_507, 1_323_798_820, 846_127_236,
    1_065_481_253, 572_240_371, 1_745_543_275, 1_011_417_836, 1_970_797_151,
    748_527_394, 343_119_399, 723_323_690, 925_975_225, 901_789_102,
    1_726_987_516, 535_828_217, 387_611_445, 464_171_383, 1_170_510_314,
    1_166_227_930, 1_807_172_811, 1_942_089_394, 985_305_323, 1_368_235_387,
    1_691_486_500, 1_568_900_638, 1_876_255_297, 1_249_183_285, 1_710_305_778,
    1_763_785_295, 1_733_366_374, 1_444_076_976, 1_629_633_514, 2_105_321_510,
    225_091_211, 898_893_218, 863_551_327, 1_441_811_554, 546_340_809,
    1_977_865_396, 2_116_495_484, 1_221_726_287, 293_109_484, 1_601_617_797,
    1_568_176_414, 1_424_797_596, 1_256_372_950, 298_799_048, 1_708_002_892,
    829_450_571, 891_710_357, 1_994_402_695, 1_136_264_020, 372_280_769,
    1_520_667_645, 983_043_723, 1_191_079_043, 680_172_541, 813_511_681,
    395_360_213, 1_648_575_360, 1_026_342_885, 2_100_497_812, 422_047_044,
    509_116_230, 859_612_092, 2_037_182_006, 895_080_280, 494_367_164,
    1_732_028_080, 355_614_494, 2_141_591_317, 1_087_251_698, 580_692_625,
    225_934_851, 1_581_062_145, 1_515_262_458, 1_497_680_539, 1_711_718_534,
    1_774_796_872, 301_673_313, 1_136_356_724, 653_050_943, 109_035_776,
    1_709_823_304, 1_340_949_553, 1_365_423_458, 1_155_459_206, 1_203_897_636,
    188_016_786, 256_210_446, 633_075_975, 19_227_407, 1_864_952_910,
    1_143_853_106, 237_020_443, 1_750_197_960, 856_837_002, 80_321_564,
    1_679_324_299, 1_257_507_406, 1_390_040_163, 1_590_461_855, 806_384_435,
    1_331_383_316, 2_027_828_650, 1_649_392_096, 1_928_309_762, 1_027_758_817,
    1_267_173_039, 123_889_599, 95_752_736, 2_060_969_286, 619_461_174,
    1_686_215_900, 1_817_156_134, 2_118_821_565, 1_596_821_127, 1_800_186_189,
    212_821_393, 661_318_748, 1_123_331_233, 146_002_907, 953_877_041,
    1_771_924_274, 929_351_822, 2_142_357_746, 356_638_683, 1_610_539_590,
    2_001_056_977, 368_889_391, 62_209_567, 1_775_608_361, 992_410_365,
    1_336_108_161, 696_448_050, 333_820_982, 585_804_640, 1_775_805_177,
    809_604_334, 93_191_015, 732_444_124, 1_492_071_476, 1_930_662_128,
    174_082_258, 340_442_582, 507_936_866, 362_748_128, 1_607_204_293,
    953_383_750, 1_599_876_594, 416_457_166, 571_635_069, 1_356_847_855,
    267_174_620, 2_011_827_638, 1_572_212_863, 589_049_769, 2_024_853_642,
    1_680_251_429, 914_906_004, 398_911_194, 795_915_364, 1_332_467_446,
    688_483_428, 628_445_699, 578_787_063, 2_006_320_950, 1_167_207_852,
    336_213_879, 1_640_952_769, 1_778_544_166, 1_617_229_086, 190_807_078,
    1_968_608_155, 2_122_852_959, 31_153_367, 1_353_144_470, 2_196_420,
    1_395_155_215, 1_948_121_717, 69_118_708, 2_140_091_269, 2_530_146,
    1_740_778_973, 1_601_247_294, 1_205_895_814, 858_150_908, 1_878_253_960,
    1_967_705_762, 2_090_543_533, 1_702_425_249, 622_114_437, 1_192_155_877,
    1_095_403_694, 2_115_445_751, 1_201_124_879, 1_140_728_569, 2_085_323_316,
    1_291_025_252, 871_908_043, 863_647_665, 1_245_819_051, 1_468_486_929,
    631_022_494, 1_161_580_432, 539_942_311, 1_943_137_808, 1_826_628_136,
    259_775_677, 277_497_333, 2_140_756_121, 973_493_986, 1_121_800_211,
    1_539_560_507, 1_337_406_065, 186_178_768, 482_917_205, 1_459_100_749,
    1_924_603_748, 390_743_779, 1_140_008_063, 517_767_440, 1_764_436_465,
    722_260_205, 1_400_929_335, 1_706_528_514, 486_165_509, 1_379_460_673,
    206_653_795, 3_159_407, 565_150_174, 688_338_919, 1_223_572_435,
    2_122_262_571, 513_009_937, 1_390_656_632, 271_906_847, 1_622_692_876,
    1_313_115_559, 2_061_144_988, 411_864_717, 437_710_825, 513_582_947,
    305_489_695, 1_713_188_647, 387_273_799, 1_901_537_567, 644_842_409,
    1_231_932_661, 356_672_421, 232_170_581, 1_636_860_706, 302_219_842,
    2_094_591_332, 1_697_686_200, 1_390_477_985, 1_833_543_700, 1_203_377_492,
    50_968_578, 1_332_379_148, 1_514_582_723, 909_273_561, 1_914_809_801,
    560_663_378, 1_032_914_339, 1_216_475_831, 113_462_155, 1_165_446_977,
    800_591_831, 1_058_677_375, 432_102_601, 2_131_797_509, 1_175_004_233,
    1_602_827_413, 878_884_686, 446_372_159, 257_728_183, 800_661_980,
    1_387_864_976, 2_004_770_236, 999_229_412, 1_428_223_489, 175_843_632,
    74_887_898, 630_393_584, 1_147_793_249, 112_648_605, 1_028_529_524,
    1_891_904_961, 1_953_919_896, 481_563_348, 436_476_038, 1_601_134_240,
    72_319_656, 1_581_118_537, 460_420_451, 1_904_576_737, 786_297_537,
    359_735_266, 1_918_354_829, 4_031_164, 1_679_777_458, 1_144_017_176,
    1_462_192_184, 690_865_719, 1_515_933_932, 363_508_800, 1_480_324_438,
    1_044_088_643, 2_036_061_488, 218_671_081, 830_595_166, 381_933_797,
    108_346_070, 92_271_196, 217_762_975, 1_522_316_172, 1_021_014_457,
    1_407_094_080, 857_894_203, 1_968_623_233, 1_459_620_801, 1_345_014_111,
    709_651_138, 520_511_102, 2_048_560_397, 1_768_795_266, 1_013_901_419,
    1_709_697_877, 1_026_380_990, 1_377_995_642, 1_560_142_576, 542_609_105,
    1_534_330_971, 528_024_121, 2_015_847_175, 325_324_443, 1_137_511_396,
    1_883_999_260, 1_871_060_346, 715_940_689, 167_653_495, 1_292_049_996,
    1_172_290_275, 2_018_336_444, 1_951_228_823, 1_666_074_170, 1_834_852_613,
    854_475_547, 308_857_120, 502_558_280, 2_105_718_728, 1_624_653_209,
    514_214_340, 976_063_110, 227_427_283, 912_381_406, 785_989_696,
    451_448_729, 212_046_016, 2_068_743_361, 117_280_545, 1_936_668_087,
    210_748_671, 1_984_152_603, 945_948_973, 1_409_001_936, 1_644_353_864,
    1_139_018_167, 678_475_375, 1_279_061_703, 723_930_558, 195_379_046,
    1_498_554_338, 999_346_398, 1_665_914_525, 1_473_735_214, 1_561_422_777,
    151_416_112, 697_817_760, 1_622_758_049, 607_761_482, 69_889_880,
    1_152_335_090, 1_063_657_548, 1_338_090_388, 55_461_678, 1_278_053_582,
    837_024_327, 1_914_764_659, 1_049_475_248, 161_502_390, 80_404_202,
    624_714_335, 879_380_479, 1_066_787_659, 1_375_470_750, 1_561_212_123,
    59_384_706, 966_363_087, 2_044_016_080, 1_178_086_274, 1_159_745_061,
    291_298_358, 173_062_659, 1_385_675_177, 652_078_020, 1_802_327_778,
    1_555_660_285, 623_909_040, 1_579_725_218, 1_649_344_003, 270_814_499,
    350_182_379, 1_188_076_819, 893_957_771, 534_384_094, 1_057_003_814,
    230_634_042, 2_117_880_007, 778_834_747, 250_859_482, 104_637_677,
    1_328_272_543, 1_869_264_274, 1_847_908_587, 311_127_477, 506_466_155,
    1_808_237_662, 607_471_900, 1_558_244_592, 1_228_817_775, 720_339_756,
    1_963_053_072, 1_011_473_945, 1_204_992_245, 566_166_447, 419_053_054,
    737_377_568, 520_329_478, 1_740_099_311, 1_682_700_783, 1_455_316_979,
    2_118_805_956, 729_509_794, 1_565_610_678, 722_347_551, 739_596_391,
    882_282_387, 926_200_942, 999_899_279, 1_318_032_594, 122_124_863,
    1_633_512_617, 1_269_707_634, 380_070_610, 1_043_920_511, 665_601_851,
    873_976_891, 717_911_282, 2_135_673_182, 761_851_297, 1_604_330_946,
    666_624_765, 513_561_613, 1_504_023_310, 1_128_895_624, 99_511_825,
    722_919_148, 1_047_336_724, 550_532_376, 1_082_864_732, 289_686_472,
    216_557_804, 1_174_587_016, 845_698_678, 1_554_106_660, 577_410_402,
    790_256_415, 675_663_963, 2_029_133_999, 161_450_336, 228_960_529,
    743_745_539, 1_352_833_750, 2_123_379_476, 852_338_021, 1_291_070_368,
    448_708_980, 1_953_450_944, 923_478_775, 827_496_819, 1_126_017_956,
    197_964_832, 281_317_274, 1_171_925_835, 764_902_582, 595_717_488,
    2_129_930_580, 1_437_147_036, 1_447_469_119, 755_554_593, 2_130_879_949,
    1_835_203_128, 1_547_662_666, 1_855_359_256, 965_490_116, 672_323_245,
    182_598_318, 216_435_361, 1_324_723_894, 1_144_669_754, 454_438_520,
    1_220_523_503, 1_520_886_946, 1_797_641_070, 1_585_050_246, 797_060_176,
    1_821_482_472, 2_128_078_174, 973_367_349, 991_874_801, 679_519_053,
    1_961_647_235, 2_094_159_153, 391_321_675, 1_604_357_658, 576_906_032,
    1_712_341_869, 344_515_114, 1_122_768_484, 1_659_079_595, 1_328_885_292,
    48_775_768, 247_448_424, 1_836_119_534, 1_564_061_243, 1_386_366_954,
    485_818_381, 37_017_340, 356_546_370, 1_675_494_182, 430_093_707,
    1_959_222_232, 1_784_682_542, 1_839_063_567, 1_596_042_792, 295_666_215,
    403_378_386, 2_114_587_535, 1_515_528_736, 1_541_546_082, 1_444_048_519,
    1_215_103_809, 1_687_941_280, 1_546_057_655, 1_905_279_500, 544_899_032,
    2_069_178_089, 1_688_652_157, 1_414_160_501, 332_201_519, 631_936_923,
    423_299_667, 1_332_937_015, 545_602_285, 310_273_032, 960_982_228,
    372_501_343, 1_933_532_372, 1_711_569_347, 11_476_473, 155_845_605,
    700_725_671, 1_457_464_894, 1_325_083_914, 172_109_594, 664_387_510,
    1_705_378_439, 376_781_122, 1_472_567_100, 343_682_568, 1_370_528_050,
    265_363_198, 2_079_492_652, 1_803_183_394, 519_194_709, 1_538_391_713,
    1_931_493_432, 1_183_464_058, 1_489_699_243, 495_097_609, 801_046_035,
    177_100_916, 1_292_413_659, 1_348_373_925, 1_550_525_411, 697_685_269,
    856_621_012, 1_992_941_115, 1_189_141_368, 221_661_515, 156_760_399,
    38_620_214, 375_863_194, 2_078_528_215, 2_103_236_982, 341_987_235,
    698_660_475, 381_094_614, 1_201_152_163, 1_275_500_498, 398_211_404,
    801_610_475, 1_087_556_673, 846_650_758, 1_848_681_194, 1_287_830_283,
    1_400_070_607, 1_603_428_054, 1_233_022_905, 810_516_965, 690_710_531,
    1_860_435_620, 750_631_050, 1_271_370_220, 860_360_715, 1_189_323_192,
    1_913_926_325, 946_425_090, 1_815_408_878, 743_572_345, 1_902_501_708,
    1_276_205_250, 2_005_653_265, 624_614_472, 2_108_439_398, 1_952_177_514,
    964_348_374, 1_171_051_384, 2_126_963_607, 812_288_356, 108_628_319,
    980_702_956, 714_456_194, 1_678_967_663, 1_935_271_536, 236_851_791,
    1_541_132_933, 1_066_014_062, 1_607_628_402, 1_926_717_418, 954_942_098,
    1_733_982_669, 14_239_125, 1_506_716_966, 848_141_854, 1_178_260_876,
    614_222_093, 731_606_176, 1_512_135_729, 63_244_522, 968_848_252,
    1_783_943_137, 1_402_735_006, 1_355_391_150, 1_659_137_391, 1_173_889_730,
    1_042_942_541, 1_318_900_244, 1_149_113_346, 2_090_025_563, 1_201_659_316,
    250_022_739, 1_035_075_488, 674_580_901, 1_090_386_021, 1_943_651_015,
    934_048_997, 2_087_660_971, 738_682_048, 1_305_071_296, 91_177_380,
    1_708_106_609, 1_685_880_008, 364_589_031, 1_860_839_427, 1_927_367_009,
    906_899_219, 1_090_443_335, 892_574_149, 1_969_729_134, 1_874_026_715,
    927_045_887, 1_159_898_528, 730_296_520, 349_249_331, 317_980_803,
    225_908_941, 483_348_027, 1_035_956_563, 241_537_930, 1_279_981_214,
    1_247_518_755, 247_447_060, 1_793_747_608, 752_388_169, 288_054_543,
    2_073_482_870, 2_039_012_903, 617_768_643, 433_412_593, 499_898_207,
    1_050_512_245, 331_284_679, 851_322_111, 1_294_873_695, 1_715_379_173,
    1_159_675_637, 1_029_338_154, 2_027_445_678, 1_653_332_243, 1_874_855_959,
    1_234_157_881, 260_674_360, 1_042_790_263, 1_401_980_800, 730_090_881,
    1_745_393_357, 1_550_721_460, 1_607_677_838, 969_500_483, 778_702_716,
    1_765_830_270, 731_763_278, 1_600_023_202, 1_957_728_250, 690_983,
    444_361_278, 1_278_777_407, 1_231_639_101, 597_427_397, 1_087_245_613,
    258_177_907, 2_093_472_294, 1_462_778_368, 2_067_100_479, 1_628_387_880,
    762_564_955, 1_194_041_213, 1_348_361_229, 1_822_279_764, 1_826_590_258,
    1_112_056_034, 2_088_786_920, 815_110_420, 1_957_877_704, 1_087_195_269,
    881_982_271, 1_945_110_368, 1_656_527_154, 529_233_847, 137_046_551,
    522_408_049, 1_880_577_483, 847_255_974, 851_716_534, 925_604_268,
    1_037_521_069, 461_527_795, 1_332_620_900, 525_605_961, 1_389_787_451,
    1_127_911_377, 1_198_857_033, 859_385_989, 706_825_946, 371_790_550,
    145_611_377, 655_200_896, 1_900_613_055, 1_333_790_305, 1_101_722_351,
    1_278_794_420, 2_089_981_667, 1_150_780_072, 13_180_701, 1_502_266_386,
    1_103_013_140, 343_038_558, 1_897_907_456, 1_612_609_979, 1_209_991_461,
    1_740_783_613, 1_643_991_754, 977_454_680, 787_842_886, 163_362_230,
    1_087_742_330, 200_253_206, 1_691_676_526, 360_632_817, 1_787_338_655,
    35_595_330, 822_635_252, 1_834_254_978, 1_372_169_786, 1_063_768_444,
    973_490_494, 697_866_347, 156_498_369, 169_293_723, 180_549_009,
    112_035_400, 127_867_199, 241_711_645, 2_004_664_325, 23_288_667,
    1_997_381_015, 736_455_241, 1_986_921_372, 1_570_645_300, 2_067_499_753,
    1_463_269_859, 148_527_979, 618_168_829, 1_715_279_374, 2_066_440_075,
    2_118_433_006, 198_233_440, 1_835_860_030, 1_345_873_587, 1_902_595_458,
    1_961_619_988, 1_291_438_802, 1_325_008_187, 836_983_022, 1_849_657_867,
    500_376_868, 1_599_565_995, 1_705_905_941, 1_600_493_361, 386_733_714,
    1_028_820_236, 1_663_100_626, 1_322_696_419, 1_482_983_072, 1_092_382_563,
    1_667_679_197, 1_965_855_212, 1_063_839_036, 1_742_032_331, 300_191_208,
    620_497_725, 503_895_325, 2_094_864_173, 928_179_911, 277_942_057,
    1_677_449_797, 1_249_086_623, 799_527_371, 1_180_063_064, 48_311_975,
    1_866_094_167, 1_405_763_119, 2_109_851_473, 1_594_621_666, 580_464_203,
    1_752_598_186, 1_339_293_088, 922_186_026, 1_403_771_494, 299_505_702,
    1_345_987_999, 1_298_200_648, 2_128_826_472, 677_220_745, 831_273_447,
    741_184_696, 696_188_251, 1_912_065_710, 1_016_469_330, 682_018_288,
    353_946_286, 559_509_624, 515_414_188, 1_852_181_952, 407_771_887,
    812_094_461, 1_859_683_061, 1_100_089_300, 498_702_377, 653_626_077,
    765_701_205, 150_878_039, 328_551_896, 77_104_822, 1_775_331_228,
    1_835_977_906, 706_357_381, 1_240_287_664, 839_507_573, 1_054_066_034,
    1_823_053_058, 701_959_731, 82_879_528, 652_404_808, 866_097_476,
    926_939_064, 1_326_017_288, 1_747_861_289, 1_173_840_088, 1_524_006_589,
    443_704_960, 835_506_582, 5_363_460, 2_068_343_250, 1_683_915_700,
    2_080_735_477, 1_913_489_530, 951_256_529, 1_752_318_678, 105_384_223,
    1_788_389_051, 1_787_391_786, 1_430_821_640, 540_952_308, 882_484_999,
    690_806_365, 202_502_890, 1_593_837_351, 530_093_821, 385_878_401,
    907_401_151, 378_912_543, 454_746_323, 251_514_112, 1_451_277_631,
    1_125_822_965, 21_289_266, 1_642_884_452, 804_368_379, 2_048_205_721,
    917_508_270, 1_514_792_012, 139_494_505, 1_143_168_018, 115_016_418,
    1_730_333_306, 1_630_776_459, 50_748_643, 1_745_247_524, 1_313_640_711,
    1_076_198_976, 1_820_281_480, 941_471_466, 806_673_335, 722_162_727,
    1_837_280_287, 705_508_794, 2_088_955_494, 510_497_580, 51_692_325,
    893_597_382, 1_373_978_529, 1_007_042_224, 685_006_165, 1_471_461_419,
    1_555_325_521, 1_215_063_385, 1_424_859_828, 657_251_271, 1_391_827_090,
    965_562_483, 604_275_115, 1_285_258_674, 341_475_746, 294_191_106,
    633_240_394, 1_897_691_227, 1_904_243_956, 823_532_901, 1_577_955_754,
    2_016_464_961, 1_862_876_260, 577_384_103, 1_012_611_702, 247_243_083,
    636_485_510, 1_952_805_989, 1_447_876_480, 108_021_700, 1_016_615_447,
    2_047_769_687, 943_871_886, 787_537_653, 12_744_598, 853_545_598,
    334_037_304, 553_373_537, 1_089_408_490, 497_867_498, 2_038_925_801,
    1_434_633_879, 1_290_629_443, 75_922_980, 957_037_315, 2_130_252_471,
    477_317_888, 952_824_381, 1_686_570_783, 459_340_678, 751_885_764,
    836_307_572, 2_027_909_489, 28_791_588, 322_748_588, 1_335_236_478,
    787_106_123, 113_580_144, 954_915_740, 1_317_077_622, 1_299_667_896,
    2_009_244_921, 1_548_588_723, 2_049_698_913, 732_388_681, 1_781_891_230,
    2_090_684_129, 993_786_972, 1_959_292_396, 1_336_513_734, 691_093_904,
    1_746_904_676, 935_573_751, 1_123_555_638, 108_413_311, 1_445_352_642,
    169_726_789, 123_352_211, 1_635_952_299, 673_775_121, 2_042_861_943,
    757_787_251, 512_494_446, 119_656_942, 58_159_196, 2_090_570_016,
    486_181_025, 1_619_641_914, 432_990_571, 894_937_325, 379_470_588,
    1_890_938_638, 1_886_317_932, 1_858_637_614, 969_358_207, 1_230_449_468,
    1_890_889_527, 351_741_654, 214_725_897, 1_550_012_286, 308_005_013,
    26_292_400, 68_067_591, 1_383_307_838, 1_746_273_091, 1_090_104_632,
    1_658_037_573, 2_081_544_705, 1_133_473_813, 1_680_294_422, 1_050_373_352,
    1_806_061_681, 1_713_475_126, 520_699_193, 417_568_373, 1_355_086_853,
    631_399_565, 1_742_434_188, 2_077_667_592, 1_709_019_727, 594_054_971,
    937_081_176, 742_185_643, 1_904_514_273, 887_841_601, 1_288_684_086,
    424_587_711, 1_497_926_365, 829_844_031, 1_384_314_543, 250_129_297,
    200_083_737, 693_737_559, 1_527_022_962, 1_462_501_905, 1_687_540_458,
    1_156_824_624, 241_481_265, 1_190_890_142, 1_250_360_726, 2_064_308_502,
    27_563_032, 1_880_483_834, 1_984_143_440, 104_727_360, 1_324_123_626,
    1_089_710_430, 1_403_206_383, 1_930_880_552, 773_197_243, 1_160_186_023,
    562_994_480, 1_065_136_414, 502_237_764, 1_642_338_733, 1_310_177_444,
    1_730_721_241, 1_475_638_246, 615_734_453, 1_160_537_912, 928_836_931,
    253_898_558, 1_799_210_492, 1_205_522_527, 413_058_646, 1_589_194_592,
    1_774_218_355, 43_955_934, 1_673_314_595, 683_393_460, 1_260_859_787,
    2_098_829_619, 772_503_535, 1_232_567_659, 758_174_758, 831_270_563,
    1_605_294_199, 1_660_678_300, 24_379_565, 1_426_483_935, 1_611_558_740,
    1_085_326_591, 12_849_216, 455_856_722, 878_692_218, 1_910_978_116,
    1_382_893_830, 1_950_124_297, 950_009_818, 904_287_249, 791_384_486,
    1_584_408_128, 210_098_472, 1_110_387_095, 364_620_240, 53_868_166,
    772_251_062, 472_745_168, 1_133_910_514, 1_715_402_379, 1_445_225_855,
    1_541_125_975, 149_171_217, 972_058_766, 1_893_095_488, 1_487_620_835,
    640_835_502, 1_470_285_405, 646_688_705, 988_431_201, 703_130_341,
    1_753_125_385, 1_985_895_474, 696_002_734, 1_783_233_173, 1_317_201_705,
    1_755_204_784, 532_132_334, 1_069_450_170, 249_700_039, 524_320_231,
    757_959_820, 2_109_052_886, 604_977_130, 1_971_654_864, 1_588_222_158,
    1_533_496_974, 623_670_976, 1_405_668_251, 1_955_436_051, 1_082_881_617,
    1_387_039_848, 874_153_641, 1_345_378_476, 1_168_465_459, 2_005_021_017,
    234_039_217, 473_318_229, 654_912_216, 1_473_166_451, 997_649_666,
    801_824_335, 2_052_343_947, 1_883_168_929, 185_658_088, 1_389_954_587,
    1_725_541_486, 885_873_448, 958_774_566, 2_054_212_564, 60_536_525,
    1_427_504_270, 1_160_285_859, 1_827_651_881, 1_408_805_003, 1_684_018_729,
    61_716_770, 844_057_079, 1_011_596_733, 1_521_350_211, 1_581_801_257,
    907_554_175, 2_022_973_269, 1_125_104_871, 1_312_064_004, 1_466_679_625,
    970_194_422, 80_900_939, 1_445_279_202, 335_456_148, 510_478_312,
    92_860_378, 1_646_704_157, 1_650_899_832, 1_533_447_203, 268_087_516,
    880_688_023, 1_180_525_723, 1_868_151_949, 1_750_955_971, 401_446_720,
    540_093_580, 1_022_861_633, 461_442_838, 1_222_554_291, 456_462_271,
    94_760_711, 1_231_111_410, 2_145_073_408, 1_932_108_837, 300_618_464,
    2_055_783_490, 980_863_365, 1_308_872_551, 1_010_427_073, 1_399_854_717,
    1_217_804_021, 934_700_736, 878_744_414,
)