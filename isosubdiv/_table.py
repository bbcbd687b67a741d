"""
ISO 3166-2 subdivision codes.

Generated by isosubdiv.generate from the ISO 3166-2 dataset. Do not edit by
hand; regenerate with `python -m isosubdiv.generate`.
"""

from isosubdiv.code import CodeBase


class Code(CodeBase):
    """An administrative subdivision code as specified by the ISO 3166-2 standard."""

    AD_02 = 'AD-02'
    AD_03 = 'AD-03'
    AD_04 = 'AD-04'
    AD_05 = 'AD-05'
    AD_06 = 'AD-06'
    AD_07 = 'AD-07'
    AD_08 = 'AD-08'
    AE_AJ = 'AE-AJ'
    AE_AZ = 'AE-AZ'
    AE_DU = 'AE-DU'
    AE_FU = 'AE-FU'
    AE_RK = 'AE-RK'
    AE_SH = 'AE-SH'
    AE_UQ = 'AE-UQ'
    AF_BAL = 'AF-BAL'
    AF_BAM = 'AF-BAM'
    AF_BDG = 'AF-BDG'
    AF_BDS = 'AF-BDS'
    AF_BGL = 'AF-BGL'
    AF_DAY = 'AF-DAY'
    AF_FRA = 'AF-FRA'
    AF_FYB = 'AF-FYB'
    AF_GHA = 'AF-GHA'
    AF_GHO = 'AF-GHO'
    AF_HEL = 'AF-HEL'
    AF_HER = 'AF-HER'
    AF_JOW = 'AF-JOW'
    AF_KAB = 'AF-KAB'
    AF_KAN = 'AF-KAN'
    AF_KAP = 'AF-KAP'
    AF_KDZ = 'AF-KDZ'
    AF_KHO = 'AF-KHO'
    AF_KNR = 'AF-KNR'
    AF_LAG = 'AF-LAG'
    AF_LOG = 'AF-LOG'
    AF_NAN = 'AF-NAN'
    AF_NIM = 'AF-NIM'
    AF_NUR = 'AF-NUR'
    AF_PAN = 'AF-PAN'
    AF_PAR = 'AF-PAR'
    AF_PIA = 'AF-PIA'
    AF_PKA = 'AF-PKA'
    AF_SAM = 'AF-SAM'
    AF_SAR = 'AF-SAR'
    AF_TAK = 'AF-TAK'
    AF_URU = 'AF-URU'
    AF_WAR = 'AF-WAR'
    AF_ZAB = 'AF-ZAB'
    AG_03 = 'AG-03'
    AG_04 = 'AG-04'
    AG_05 = 'AG-05'
    AG_06 = 'AG-06'
    AG_07 = 'AG-07'
    AG_08 = 'AG-08'
    AG_10 = 'AG-10'
    AG_11 = 'AG-11'
    AL_01 = 'AL-01'
    AL_02 = 'AL-02'
    AL_03 = 'AL-03'
    AL_04 = 'AL-04'
    AL_05 = 'AL-05'
    AL_06 = 'AL-06'
    AL_07 = 'AL-07'
    AL_08 = 'AL-08'
    AL_09 = 'AL-09'
    AL_10 = 'AL-10'
    AL_11 = 'AL-11'
    AL_12 = 'AL-12'
    AM_AG = 'AM-AG'
    AM_AR = 'AM-AR'
    AM_AV = 'AM-AV'
    AM_ER = 'AM-ER'
    AM_GR = 'AM-GR'
    AM_KT = 'AM-KT'
    AM_LO = 'AM-LO'
    AM_SH = 'AM-SH'
    AM_SU = 'AM-SU'
    AM_TV = 'AM-TV'
    AM_VD = 'AM-VD'
    AO_BGO = 'AO-BGO'
    AO_BGU = 'AO-BGU'
    AO_BIE = 'AO-BIE'
    AO_CAB = 'AO-CAB'
    AO_CCU = 'AO-CCU'
    AO_CNN = 'AO-CNN'
    AO_CNO = 'AO-CNO'
    AO_CUS = 'AO-CUS'
    AO_HUA = 'AO-HUA'
    AO_HUI = 'AO-HUI'
    AO_LNO = 'AO-LNO'
    AO_LSU = 'AO-LSU'
    AO_LUA = 'AO-LUA'
    AO_MAL = 'AO-MAL'
    AO_MOX = 'AO-MOX'
    AO_NAM = 'AO-NAM'
    AO_UIG = 'AO-UIG'
    AO_ZAI = 'AO-ZAI'
    AR_A = 'AR-A'
    AR_B = 'AR-B'
    AR_C = 'AR-C'
    AR_D = 'AR-D'
    AR_E = 'AR-E'
    AR_F = 'AR-F'
    AR_G = 'AR-G'
    AR_H = 'AR-H'
    AR_J = 'AR-J'
    AR_K = 'AR-K'
    AR_L = 'AR-L'
    AR_M = 'AR-M'
    AR_N = 'AR-N'
    AR_P = 'AR-P'
    AR_Q = 'AR-Q'
    AR_R = 'AR-R'
    AR_S = 'AR-S'
    AR_T = 'AR-T'
    AR_U = 'AR-U'
    AR_V = 'AR-V'
    AR_W = 'AR-W'
    AR_X = 'AR-X'
    AR_Y = 'AR-Y'
    AR_Z = 'AR-Z'
    AT_1 = 'AT-1'
    AT_2 = 'AT-2'
    AT_3 = 'AT-3'
    AT_4 = 'AT-4'
    AT_5 = 'AT-5'
    AT_6 = 'AT-6'
    AT_7 = 'AT-7'
    AT_8 = 'AT-8'
    AT_9 = 'AT-9'
    AU_ACT = 'AU-ACT'
    AU_NSW = 'AU-NSW'
    AU_NT = 'AU-NT'
    AU_QLD = 'AU-QLD'
    AU_SA = 'AU-SA'
    AU_TAS = 'AU-TAS'
    AU_VIC = 'AU-VIC'
    AU_WA = 'AU-WA'
    AZ_ABS = 'AZ-ABS'
    AZ_AGA = 'AZ-AGA'
    AZ_AGC = 'AZ-AGC'
    AZ_AGM = 'AZ-AGM'
    AZ_AGS = 'AZ-AGS'
    AZ_AGU = 'AZ-AGU'
    AZ_AST = 'AZ-AST'
    AZ_BA = 'AZ-BA'
    AZ_BAB = 'AZ-BAB'
    AZ_BAL = 'AZ-BAL'
    AZ_BAR = 'AZ-BAR'
    AZ_BEY = 'AZ-BEY'
    AZ_BIL = 'AZ-BIL'
    AZ_CAB = 'AZ-CAB'
    AZ_CAL = 'AZ-CAL'
    AZ_CUL = 'AZ-CUL'
    AZ_DAS = 'AZ-DAS'
    AZ_FUZ = 'AZ-FUZ'
    AZ_GA = 'AZ-GA'
    AZ_GAD = 'AZ-GAD'
    AZ_GOR = 'AZ-GOR'
    AZ_GOY = 'AZ-GOY'
    AZ_GYG = 'AZ-GYG'
    AZ_HAC = 'AZ-HAC'
    AZ_IMI = 'AZ-IMI'
    AZ_ISM = 'AZ-ISM'
    AZ_KAL = 'AZ-KAL'
    AZ_KAN = 'AZ-KAN'
    AZ_KUR = 'AZ-KUR'
    AZ_LA = 'AZ-LA'
    AZ_LAC = 'AZ-LAC'
    AZ_LAN = 'AZ-LAN'
    AZ_LER = 'AZ-LER'
    AZ_MAS = 'AZ-MAS'
    AZ_MI = 'AZ-MI'
    AZ_NA = 'AZ-NA'
    AZ_NEF = 'AZ-NEF'
    AZ_NV = 'AZ-NV'
    AZ_NX = 'AZ-NX'
    AZ_OGU = 'AZ-OGU'
    AZ_ORD = 'AZ-ORD'
    AZ_QAB = 'AZ-QAB'
    AZ_QAX = 'AZ-QAX'
    AZ_QAZ = 'AZ-QAZ'
    AZ_QBA = 'AZ-QBA'
    AZ_QBI = 'AZ-QBI'
    AZ_QOB = 'AZ-QOB'
    AZ_QUS = 'AZ-QUS'
    AZ_SA = 'AZ-SA'
    AZ_SAB = 'AZ-SAB'
    AZ_SAD = 'AZ-SAD'
    AZ_SAH = 'AZ-SAH'
    AZ_SAK = 'AZ-SAK'
    AZ_SAL = 'AZ-SAL'
    AZ_SAR = 'AZ-SAR'
    AZ_SAT = 'AZ-SAT'
    AZ_SBN = 'AZ-SBN'
    AZ_SIY = 'AZ-SIY'
    AZ_SKR = 'AZ-SKR'
    AZ_SM = 'AZ-SM'
    AZ_SMI = 'AZ-SMI'
    AZ_SMX = 'AZ-SMX'
    AZ_SR = 'AZ-SR'
    AZ_SUS = 'AZ-SUS'
    AZ_TAR = 'AZ-TAR'
    AZ_TOV = 'AZ-TOV'
    AZ_UCA = 'AZ-UCA'
    AZ_XA = 'AZ-XA'
    AZ_XAC = 'AZ-XAC'
    AZ_XCI = 'AZ-XCI'
    AZ_XIZ = 'AZ-XIZ'
    AZ_XVD = 'AZ-XVD'
    AZ_YAR = 'AZ-YAR'
    AZ_YE = 'AZ-YE'
    AZ_YEV = 'AZ-YEV'
    AZ_ZAN = 'AZ-ZAN'
    AZ_ZAQ = 'AZ-ZAQ'
    AZ_ZAR = 'AZ-ZAR'
    BA_BIH = 'BA-BIH'
    BA_BRC = 'BA-BRC'
    BA_SRP = 'BA-SRP'
    BB_01 = 'BB-01'
    BB_02 = 'BB-02'
    BB_03 = 'BB-03'
    BB_04 = 'BB-04'
    BB_05 = 'BB-05'
    BB_06 = 'BB-06'
    BB_07 = 'BB-07'
    BB_08 = 'BB-08'
    BB_09 = 'BB-09'
    BB_10 = 'BB-10'
    BB_11 = 'BB-11'
    BD_01 = 'BD-01'
    BD_02 = 'BD-02'
    BD_03 = 'BD-03'
    BD_04 = 'BD-04'
    BD_05 = 'BD-05'
    BD_06 = 'BD-06'
    BD_07 = 'BD-07'
    BD_08 = 'BD-08'
    BD_09 = 'BD-09'
    BD_10 = 'BD-10'
    BD_11 = 'BD-11'
    BD_12 = 'BD-12'
    BD_13 = 'BD-13'
    BD_14 = 'BD-14'
    BD_15 = 'BD-15'
    BD_16 = 'BD-16'
    BD_17 = 'BD-17'
    BD_18 = 'BD-18'
    BD_19 = 'BD-19'
    BD_20 = 'BD-20'
    BD_21 = 'BD-21'
    BD_22 = 'BD-22'
    BD_23 = 'BD-23'
    BD_24 = 'BD-24'
    BD_25 = 'BD-25'
    BD_26 = 'BD-26'
    BD_27 = 'BD-27'
    BD_28 = 'BD-28'
    BD_29 = 'BD-29'
    BD_30 = 'BD-30'
    BD_31 = 'BD-31'
    BD_32 = 'BD-32'
    BD_33 = 'BD-33'
    BD_34 = 'BD-34'
    BD_35 = 'BD-35'
    BD_36 = 'BD-36'
    BD_37 = 'BD-37'
    BD_38 = 'BD-38'
    BD_39 = 'BD-39'
    BD_40 = 'BD-40'
    BD_41 = 'BD-41'
    BD_42 = 'BD-42'
    BD_43 = 'BD-43'
    BD_44 = 'BD-44'
    BD_45 = 'BD-45'
    BD_46 = 'BD-46'
    BD_47 = 'BD-47'
    BD_48 = 'BD-48'
    BD_49 = 'BD-49'
    BD_50 = 'BD-50'
    BD_51 = 'BD-51'
    BD_52 = 'BD-52'
    BD_53 = 'BD-53'
    BD_54 = 'BD-54'
    BD_55 = 'BD-55'
    BD_56 = 'BD-56'
    BD_57 = 'BD-57'
    BD_58 = 'BD-58'
    BD_59 = 'BD-59'
    BD_60 = 'BD-60'
    BD_61 = 'BD-61'
    BD_62 = 'BD-62'
    BD_63 = 'BD-63'
    BD_64 = 'BD-64'
    BD_A = 'BD-A'
    BD_B = 'BD-B'
    BD_C = 'BD-C'
    BD_D = 'BD-D'
    BD_E = 'BD-E'
    BD_F = 'BD-F'
    BD_G = 'BD-G'
    BD_H = 'BD-H'
    BE_BRU = 'BE-BRU'
    BE_VAN = 'BE-VAN'
    BE_VBR = 'BE-VBR'
    BE_VLG = 'BE-VLG'
    BE_VLI = 'BE-VLI'
    BE_VOV = 'BE-VOV'
    BE_VWV = 'BE-VWV'
    BE_WAL = 'BE-WAL'
    BE_WBR = 'BE-WBR'
    BE_WHT = 'BE-WHT'
    BE_WLG = 'BE-WLG'
    BE_WLX = 'BE-WLX'
    BE_WNA = 'BE-WNA'
    BF_01 = 'BF-01'
    BF_02 = 'BF-02'
    BF_03 = 'BF-03'
    BF_04 = 'BF-04'
    BF_05 = 'BF-05'
    BF_06 = 'BF-06'
    BF_07 = 'BF-07'
    BF_08 = 'BF-08'
    BF_09 = 'BF-09'
    BF_10 = 'BF-10'
    BF_11 = 'BF-11'
    BF_12 = 'BF-12'
    BF_13 = 'BF-13'
    BF_BAL = 'BF-BAL'
    BF_BAM = 'BF-BAM'
    BF_BAN = 'BF-BAN'
    BF_BAZ = 'BF-BAZ'
    BF_BGR = 'BF-BGR'
    BF_BLG = 'BF-BLG'
    BF_BLK = 'BF-BLK'
    BF_COM = 'BF-COM'
    BF_GAN = 'BF-GAN'
    BF_GNA = 'BF-GNA'
    BF_GOU = 'BF-GOU'
    BF_HOU = 'BF-HOU'
    BF_IOB = 'BF-IOB'
    BF_KAD = 'BF-KAD'
    BF_KEN = 'BF-KEN'
    BF_KMD = 'BF-KMD'
    BF_KMP = 'BF-KMP'
    BF_KOP = 'BF-KOP'
    BF_KOS = 'BF-KOS'
    BF_KOT = 'BF-KOT'
    BF_KOW = 'BF-KOW'
    BF_LER = 'BF-LER'
    BF_LOR = 'BF-LOR'
    BF_MOU = 'BF-MOU'
    BF_NAM = 'BF-NAM'
    BF_NAO = 'BF-NAO'
    BF_NAY = 'BF-NAY'
    BF_NOU = 'BF-NOU'
    BF_OUB = 'BF-OUB'
    BF_OUD = 'BF-OUD'
    BF_PAS = 'BF-PAS'
    BF_PON = 'BF-PON'
    BF_SEN = 'BF-SEN'
    BF_SIS = 'BF-SIS'
    BF_SMT = 'BF-SMT'
    BF_SNG = 'BF-SNG'
    BF_SOM = 'BF-SOM'
    BF_SOR = 'BF-SOR'
    BF_TAP = 'BF-TAP'
    BF_TUI = 'BF-TUI'
    BF_YAG = 'BF-YAG'
    BF_YAT = 'BF-YAT'
    BF_ZIR = 'BF-ZIR'
    BF_ZON = 'BF-ZON'
    BF_ZOU = 'BF-ZOU'
    BG_01 = 'BG-01'
    BG_02 = 'BG-02'
    BG_03 = 'BG-03'
    BG_04 = 'BG-04'
    BG_05 = 'BG-05'
    BG_06 = 'BG-06'
    BG_07 = 'BG-07'
    BG_08 = 'BG-08'
    BG_09 = 'BG-09'
    BG_10 = 'BG-10'
    BG_11 = 'BG-11'
    BG_12 = 'BG-12'
    BG_13 = 'BG-13'
    BG_14 = 'BG-14'
    BG_15 = 'BG-15'
    BG_16 = 'BG-16'
    BG_17 = 'BG-17'
    BG_18 = 'BG-18'
    BG_19 = 'BG-19'
    BG_20 = 'BG-20'
    BG_21 = 'BG-21'
    BG_22 = 'BG-22'
    BG_23 = 'BG-23'
    BG_24 = 'BG-24'
    BG_25 = 'BG-25'
    BG_26 = 'BG-26'
    BG_27 = 'BG-27'
    BG_28 = 'BG-28'
    BH_13 = 'BH-13'
    BH_14 = 'BH-14'
    BH_15 = 'BH-15'
    BH_17 = 'BH-17'
    BI_BB = 'BI-BB'
    BI_BL = 'BI-BL'
    BI_BM = 'BI-BM'
    BI_BR = 'BI-BR'
    BI_CA = 'BI-CA'
    BI_CI = 'BI-CI'
    BI_GI = 'BI-GI'
    BI_KI = 'BI-KI'
    BI_KR = 'BI-KR'
    BI_KY = 'BI-KY'
    BI_MA = 'BI-MA'
    BI_MU = 'BI-MU'
    BI_MW = 'BI-MW'
    BI_MY = 'BI-MY'
    BI_NG = 'BI-NG'
    BI_RM = 'BI-RM'
    BI_RT = 'BI-RT'
    BI_RY = 'BI-RY'
    BJ_AK = 'BJ-AK'
    BJ_AL = 'BJ-AL'
    BJ_AQ = 'BJ-AQ'
    BJ_BO = 'BJ-BO'
    BJ_CO = 'BJ-CO'
    BJ_DO = 'BJ-DO'
    BJ_KO = 'BJ-KO'
    BJ_LI = 'BJ-LI'
    BJ_MO = 'BJ-MO'
    BJ_OU = 'BJ-OU'
    BJ_PL = 'BJ-PL'
    BJ_ZO = 'BJ-ZO'
    BN_BE = 'BN-BE'
    BN_BM = 'BN-BM'
    BN_TE = 'BN-TE'
    BN_TU = 'BN-TU'
    BO_B = 'BO-B'
    BO_C = 'BO-C'
    BO_H = 'BO-H'
    BO_L = 'BO-L'
    BO_N = 'BO-N'
    BO_O = 'BO-O'
    BO_P = 'BO-P'
    BO_S = 'BO-S'
    BO_T = 'BO-T'
    BQ_BO = 'BQ-BO'
    BQ_SA = 'BQ-SA'
    BQ_SE = 'BQ-SE'
    BR_AC = 'BR-AC'
    BR_AL = 'BR-AL'
    BR_AM = 'BR-AM'
    BR_AP = 'BR-AP'
    BR_BA = 'BR-BA'
    BR_CE = 'BR-CE'
    BR_DF = 'BR-DF'
    BR_ES = 'BR-ES'
    BR_GO = 'BR-GO'
    BR_MA = 'BR-MA'
    BR_MG = 'BR-MG'
    BR_MS = 'BR-MS'
    BR_MT = 'BR-MT'
    BR_PA = 'BR-PA'
    BR_PB = 'BR-PB'
    BR_PE = 'BR-PE'
    BR_PI = 'BR-PI'
    BR_PR = 'BR-PR'
    BR_RJ = 'BR-RJ'
    BR_RN = 'BR-RN'
    BR_RO = 'BR-RO'
    BR_RR = 'BR-RR'
    BR_RS = 'BR-RS'
    BR_SC = 'BR-SC'
    BR_SE = 'BR-SE'
    BR_SP = 'BR-SP'
    BR_TO = 'BR-TO'
    BS_AK = 'BS-AK'
    BS_BI = 'BS-BI'
    BS_BP = 'BS-BP'
    BS_BY = 'BS-BY'
    BS_CE = 'BS-CE'
    BS_CI = 'BS-CI'
    BS_CK = 'BS-CK'
    BS_CO = 'BS-CO'
    BS_CS = 'BS-CS'
    BS_EG = 'BS-EG'
    BS_EX = 'BS-EX'
    BS_FP = 'BS-FP'
    BS_GC = 'BS-GC'
    BS_HI = 'BS-HI'
    BS_HT = 'BS-HT'
    BS_IN = 'BS-IN'
    BS_LI = 'BS-LI'
    BS_MC = 'BS-MC'
    BS_MG = 'BS-MG'
    BS_MI = 'BS-MI'
    BS_NE = 'BS-NE'
    BS_NO = 'BS-NO'
    BS_NP = 'BS-NP'
    BS_NS = 'BS-NS'
    BS_RC = 'BS-RC'
    BS_RI = 'BS-RI'
    BS_SA = 'BS-SA'
    BS_SE = 'BS-SE'
    BS_SO = 'BS-SO'
    BS_SS = 'BS-SS'
    BS_SW = 'BS-SW'
    BS_WG = 'BS-WG'
    BT_11 = 'BT-11'
    BT_12 = 'BT-12'
    BT_13 = 'BT-13'
    BT_14 = 'BT-14'
    BT_15 = 'BT-15'
    BT_21 = 'BT-21'
    BT_22 = 'BT-22'
    BT_23 = 'BT-23'
    BT_24 = 'BT-24'
    BT_31 = 'BT-31'
    BT_32 = 'BT-32'
    BT_33 = 'BT-33'
    BT_34 = 'BT-34'
    BT_41 = 'BT-41'
    BT_42 = 'BT-42'
    BT_43 = 'BT-43'
    BT_44 = 'BT-44'
    BT_45 = 'BT-45'
    BT_GA = 'BT-GA'
    BT_TY = 'BT-TY'
    BW_CE = 'BW-CE'
    BW_CH = 'BW-CH'
    BW_FR = 'BW-FR'
    BW_GA = 'BW-GA'
    BW_GH = 'BW-GH'
    BW_JW = 'BW-JW'
    BW_KG = 'BW-KG'
    BW_KL = 'BW-KL'
    BW_KW = 'BW-KW'
    BW_LO = 'BW-LO'
    BW_NE = 'BW-NE'
    BW_NW = 'BW-NW'
    BW_SE = 'BW-SE'
    BW_SO = 'BW-SO'
    BW_SP = 'BW-SP'
    BW_ST = 'BW-ST'
    BY_BR = 'BY-BR'
    BY_HM = 'BY-HM'
    BY_HO = 'BY-HO'
    BY_HR = 'BY-HR'
    BY_MA = 'BY-MA'
    BY_MI = 'BY-MI'
    BY_VI = 'BY-VI'
    BZ_BZ = 'BZ-BZ'
    BZ_CY = 'BZ-CY'
    BZ_CZL = 'BZ-CZL'
    BZ_OW = 'BZ-OW'
    BZ_SC = 'BZ-SC'
    BZ_TOL = 'BZ-TOL'
    CA_AB = 'CA-AB'
    CA_BC = 'CA-BC'
    CA_MB = 'CA-MB'
    CA_NB = 'CA-NB'
    CA_NL = 'CA-NL'
    CA_NS = 'CA-NS'
    CA_NT = 'CA-NT'
    CA_NU = 'CA-NU'
    CA_ON = 'CA-ON'
    CA_PE = 'CA-PE'
    CA_QC = 'CA-QC'
    CA_SK = 'CA-SK'
    CA_YT = 'CA-YT'
    CD_BC = 'CD-BC'
    CD_BU = 'CD-BU'
    CD_EQ = 'CD-EQ'
    CD_HK = 'CD-HK'
    CD_HL = 'CD-HL'
    CD_HU = 'CD-HU'
    CD_IT = 'CD-IT'
    CD_KC = 'CD-KC'
    CD_KE = 'CD-KE'
    CD_KG = 'CD-KG'
    CD_KL = 'CD-KL'
    CD_KN = 'CD-KN'
    CD_KS = 'CD-KS'
    CD_LO = 'CD-LO'
    CD_LU = 'CD-LU'
    CD_MA = 'CD-MA'
    CD_MN = 'CD-MN'
    CD_MO = 'CD-MO'
    CD_NK = 'CD-NK'
    CD_NU = 'CD-NU'
    CD_SA = 'CD-SA'
    CD_SK = 'CD-SK'
    CD_SU = 'CD-SU'
    CD_TA = 'CD-TA'
    CD_TO = 'CD-TO'
    CD_TU = 'CD-TU'
    CF_AC = 'CF-AC'
    CF_BB = 'CF-BB'
    CF_BGF = 'CF-BGF'
    CF_BK = 'CF-BK'
    CF_HK = 'CF-HK'
    CF_HM = 'CF-HM'
    CF_HS = 'CF-HS'
    CF_KB = 'CF-KB'
    CF_KG = 'CF-KG'
    CF_LB = 'CF-LB'
    CF_MB = 'CF-MB'
    CF_MP = 'CF-MP'
    CF_NM = 'CF-NM'
    CF_OP = 'CF-OP'
    CF_SE = 'CF-SE'
    CF_UK = 'CF-UK'
    CF_VK = 'CF-VK'
    CG_11 = 'CG-11'
    CG_12 = 'CG-12'
    CG_13 = 'CG-13'
    CG_14 = 'CG-14'
    CG_15 = 'CG-15'
    CG_16 = 'CG-16'
    CG_2 = 'CG-2'
    CG_5 = 'CG-5'
    CG_7 = 'CG-7'
    CG_8 = 'CG-8'
    CG_9 = 'CG-9'
    CG_BZV = 'CG-BZV'
    CH_AG = 'CH-AG'
    CH_AI = 'CH-AI'
    CH_AR = 'CH-AR'
    CH_BE = 'CH-BE'
    CH_BL = 'CH-BL'
    CH_BS = 'CH-BS'
    CH_FR = 'CH-FR'
    CH_GE = 'CH-GE'
    CH_GL = 'CH-GL'
    CH_GR = 'CH-GR'
    CH_JU = 'CH-JU'
    CH_LU = 'CH-LU'
    CH_NE = 'CH-NE'
    CH_NW = 'CH-NW'
    CH_OW = 'CH-OW'
    CH_SG = 'CH-SG'
    CH_SH = 'CH-SH'
    CH_SO = 'CH-SO'
    CH_SZ = 'CH-SZ'
    CH_TG = 'CH-TG'
    CH_TI = 'CH-TI'
    CH_UR = 'CH-UR'
    CH_VD = 'CH-VD'
    CH_VS = 'CH-VS'
    CH_ZG = 'CH-ZG'
    CH_ZH = 'CH-ZH'
    CI_AB = 'CI-AB'
    CI_BS = 'CI-BS'
    CI_CM = 'CI-CM'
    CI_DN = 'CI-DN'
    CI_GD = 'CI-GD'
    CI_LC = 'CI-LC'
    CI_LG = 'CI-LG'
    CI_MG = 'CI-MG'
    CI_SM = 'CI-SM'
    CI_SV = 'CI-SV'
    CI_VB = 'CI-VB'
    CI_WR = 'CI-WR'
    CI_YM = 'CI-YM'
    CI_ZZ = 'CI-ZZ'
    CL_AI = 'CL-AI'
    CL_AN = 'CL-AN'
    CL_AP = 'CL-AP'
    CL_AR = 'CL-AR'
    CL_AT = 'CL-AT'
    CL_BI = 'CL-BI'
    CL_CO = 'CL-CO'
    CL_LI = 'CL-LI'
    CL_LL = 'CL-LL'
    CL_LR = 'CL-LR'
    CL_MA = 'CL-MA'
    CL_ML = 'CL-ML'
    CL_NB = 'CL-NB'
    CL_RM = 'CL-RM'
    CL_TA = 'CL-TA'
    CL_VS = 'CL-VS'
    CM_AD = 'CM-AD'
    CM_CE = 'CM-CE'
    CM_EN = 'CM-EN'
    CM_ES = 'CM-ES'
    CM_LT = 'CM-LT'
    CM_NO = 'CM-NO'
    CM_NW = 'CM-NW'
    CM_OU = 'CM-OU'
    CM_SU = 'CM-SU'
    CM_SW = 'CM-SW'
    CN_AH = 'CN-AH'
    CN_BJ = 'CN-BJ'
    CN_CQ = 'CN-CQ'
    CN_FJ = 'CN-FJ'
    CN_GD = 'CN-GD'
    CN_GS = 'CN-GS'
    CN_GX = 'CN-GX'
    CN_GZ = 'CN-GZ'
    CN_HA = 'CN-HA'
    CN_HB = 'CN-HB'
    CN_HE = 'CN-HE'
    CN_HI = 'CN-HI'
    CN_HK = 'CN-HK'
    CN_HL = 'CN-HL'
    CN_HN = 'CN-HN'
    CN_JL = 'CN-JL'
    CN_JS = 'CN-JS'
    CN_JX = 'CN-JX'
    CN_LN = 'CN-LN'
    CN_MO = 'CN-MO'
    CN_NM = 'CN-NM'
    CN_NX = 'CN-NX'
    CN_QH = 'CN-QH'
    CN_SC = 'CN-SC'
    CN_SD = 'CN-SD'
    CN_SH = 'CN-SH'
    CN_SN = 'CN-SN'
    CN_SX = 'CN-SX'
    CN_TJ = 'CN-TJ'
    CN_TW = 'CN-TW'
    CN_XJ = 'CN-XJ'
    CN_XZ = 'CN-XZ'
    CN_YN = 'CN-YN'
    CN_ZJ = 'CN-ZJ'
    CO_AMA = 'CO-AMA'
    CO_ANT = 'CO-ANT'
    CO_ARA = 'CO-ARA'
    CO_ATL = 'CO-ATL'
    CO_BOL = 'CO-BOL'
    CO_BOY = 'CO-BOY'
    CO_CAL = 'CO-CAL'
    CO_CAQ = 'CO-CAQ'
    CO_CAS = 'CO-CAS'
    CO_CAU = 'CO-CAU'
    CO_CES = 'CO-CES'
    CO_CHO = 'CO-CHO'
    CO_COR = 'CO-COR'
    CO_CUN = 'CO-CUN'
    CO_DC = 'CO-DC'
    CO_GUA = 'CO-GUA'
    CO_GUV = 'CO-GUV'
    CO_HUI = 'CO-HUI'
    CO_LAG = 'CO-LAG'
    CO_MAG = 'CO-MAG'
    CO_MET = 'CO-MET'
    CO_NAR = 'CO-NAR'
    CO_NSA = 'CO-NSA'
    CO_PUT = 'CO-PUT'
    CO_QUI = 'CO-QUI'
    CO_RIS = 'CO-RIS'
    CO_SAN = 'CO-SAN'
    CO_SAP = 'CO-SAP'
    CO_SUC = 'CO-SUC'
    CO_TOL = 'CO-TOL'
    CO_VAC = 'CO-VAC'
    CO_VAU = 'CO-VAU'
    CO_VID = 'CO-VID'
    CR_A = 'CR-A'
    CR_C = 'CR-C'
    CR_G = 'CR-G'
    CR_H = 'CR-H'
    CR_L = 'CR-L'
    CR_P = 'CR-P'
    CR_SJ = 'CR-SJ'
    CU_01 = 'CU-01'
    CU_03 = 'CU-03'
    CU_04 = 'CU-04'
    CU_05 = 'CU-05'
    CU_06 = 'CU-06'
    CU_07 = 'CU-07'
    CU_08 = 'CU-08'
    CU_09 = 'CU-09'
    CU_10 = 'CU-10'
    CU_11 = 'CU-11'
    CU_12 = 'CU-12'
    CU_13 = 'CU-13'
    CU_14 = 'CU-14'
    CU_15 = 'CU-15'
    CU_16 = 'CU-16'
    CU_99 = 'CU-99'
    CV_B = 'CV-B'
    CV_BR = 'CV-BR'
    CV_BV = 'CV-BV'
    CV_CA = 'CV-CA'
    CV_CF = 'CV-CF'
    CV_CR = 'CV-CR'
    CV_MA = 'CV-MA'
    CV_MO = 'CV-MO'
    CV_PA = 'CV-PA'
    CV_PN = 'CV-PN'
    CV_PR = 'CV-PR'
    CV_RB = 'CV-RB'
    CV_RG = 'CV-RG'
    CV_RS = 'CV-RS'
    CV_S = 'CV-S'
    CV_SD = 'CV-SD'
    CV_SF = 'CV-SF'
    CV_SL = 'CV-SL'
    CV_SM = 'CV-SM'
    CV_SO = 'CV-SO'
    CV_SS = 'CV-SS'
    CV_SV = 'CV-SV'
    CV_TA = 'CV-TA'
    CV_TS = 'CV-TS'
    CY_01 = 'CY-01'
    CY_02 = 'CY-02'
    CY_03 = 'CY-03'
    CY_04 = 'CY-04'
    CY_05 = 'CY-05'
    CY_06 = 'CY-06'
    CZ_10 = 'CZ-10'
    CZ_20 = 'CZ-20'
    CZ_201 = 'CZ-201'
    CZ_202 = 'CZ-202'
    CZ_203 = 'CZ-203'
    CZ_204 = 'CZ-204'
    CZ_205 = 'CZ-205'
    CZ_206 = 'CZ-206'
    CZ_207 = 'CZ-207'
    CZ_208 = 'CZ-208'
    CZ_209 = 'CZ-209'
    CZ_20A = 'CZ-20A'
    CZ_20B = 'CZ-20B'
    CZ_20C = 'CZ-20C'
    CZ_31 = 'CZ-31'
    CZ_311 = 'CZ-311'
    CZ_312 = 'CZ-312'
    CZ_313 = 'CZ-313'
    CZ_314 = 'CZ-314'
    CZ_315 = 'CZ-315'
    CZ_316 = 'CZ-316'
    CZ_317 = 'CZ-317'
    CZ_32 = 'CZ-32'
    CZ_321 = 'CZ-321'
    CZ_322 = 'CZ-322'
    CZ_323 = 'CZ-323'
    CZ_324 = 'CZ-324'
    CZ_325 = 'CZ-325'
    CZ_326 = 'CZ-326'
    CZ_327 = 'CZ-327'
    CZ_41 = 'CZ-41'
    CZ_411 = 'CZ-411'
    CZ_412 = 'CZ-412'
    CZ_413 = 'CZ-413'
    CZ_42 = 'CZ-42'
    CZ_421 = 'CZ-421'
    CZ_422 = 'CZ-422'
    CZ_423 = 'CZ-423'
    CZ_424 = 'CZ-424'
    CZ_425 = 'CZ-425'
    CZ_426 = 'CZ-426'
    CZ_427 = 'CZ-427'
    CZ_51 = 'CZ-51'
    CZ_511 = 'CZ-511'
    CZ_512 = 'CZ-512'
    CZ_513 = 'CZ-513'
    CZ_514 = 'CZ-514'
    CZ_52 = 'CZ-52'
    CZ_521 = 'CZ-521'
    CZ_522 = 'CZ-522'
    CZ_523 = 'CZ-523'
    CZ_524 = 'CZ-524'
    CZ_525 = 'CZ-525'
    CZ_53 = 'CZ-53'
    CZ_531 = 'CZ-531'
    CZ_532 = 'CZ-532'
    CZ_533 = 'CZ-533'
    CZ_534 = 'CZ-534'
    CZ_63 = 'CZ-63'
    CZ_631 = 'CZ-631'
    CZ_632 = 'CZ-632'
    CZ_633 = 'CZ-633'
    CZ_634 = 'CZ-634'
    CZ_635 = 'CZ-635'
    CZ_64 = 'CZ-64'
    CZ_641 = 'CZ-641'
    CZ_642 = 'CZ-642'
    CZ_643 = 'CZ-643'
    CZ_644 = 'CZ-644'
    CZ_645 = 'CZ-645'
    CZ_646 = 'CZ-646'
    CZ_647 = 'CZ-647'
    CZ_71 = 'CZ-71'
    CZ_711 = 'CZ-711'
    CZ_712 = 'CZ-712'
    CZ_713 = 'CZ-713'
    CZ_714 = 'CZ-714'
    CZ_715 = 'CZ-715'
    CZ_72 = 'CZ-72'
    CZ_721 = 'CZ-721'
    CZ_722 = 'CZ-722'
    CZ_723 = 'CZ-723'
    CZ_724 = 'CZ-724'
    CZ_80 = 'CZ-80'
    CZ_801 = 'CZ-801'
    CZ_802 = 'CZ-802'
    CZ_803 = 'CZ-803'
    CZ_804 = 'CZ-804'
    CZ_805 = 'CZ-805'
    CZ_806 = 'CZ-806'
    DE_BB = 'DE-BB'
    DE_BE = 'DE-BE'
    DE_BW = 'DE-BW'
    DE_BY = 'DE-BY'
    DE_HB = 'DE-HB'
    DE_HE = 'DE-HE'
    DE_HH = 'DE-HH'
    DE_MV = 'DE-MV'
    DE_NI = 'DE-NI'
    DE_NW = 'DE-NW'
    DE_RP = 'DE-RP'
    DE_SH = 'DE-SH'
    DE_SL = 'DE-SL'
    DE_SN = 'DE-SN'
    DE_ST = 'DE-ST'
    DE_TH = 'DE-TH'
    DJ_AR = 'DJ-AR'
    DJ_AS = 'DJ-AS'
    DJ_DI = 'DJ-DI'
    DJ_DJ = 'DJ-DJ'
    DJ_OB = 'DJ-OB'
    DJ_TA = 'DJ-TA'
    DK_81 = 'DK-81'
    DK_82 = 'DK-82'
    DK_83 = 'DK-83'
    DK_84 = 'DK-84'
    DK_85 = 'DK-85'
    DM_02 = 'DM-02'
    DM_03 = 'DM-03'
    DM_04 = 'DM-04'
    DM_05 = 'DM-05'
    DM_06 = 'DM-06'
    DM_07 = 'DM-07'
    DM_08 = 'DM-08'
    DM_09 = 'DM-09'
    DM_10 = 'DM-10'
    DM_11 = 'DM-11'
    DO_01 = 'DO-01'
    DO_02 = 'DO-02'
    DO_03 = 'DO-03'
    DO_04 = 'DO-04'
    DO_05 = 'DO-05'
    DO_06 = 'DO-06'
    DO_07 = 'DO-07'
    DO_08 = 'DO-08'
    DO_09 = 'DO-09'
    DO_10 = 'DO-10'
    DO_11 = 'DO-11'
    DO_12 = 'DO-12'
    DO_13 = 'DO-13'
    DO_14 = 'DO-14'
    DO_15 = 'DO-15'
    DO_16 = 'DO-16'
    DO_17 = 'DO-17'
    DO_18 = 'DO-18'
    DO_19 = 'DO-19'
    DO_20 = 'DO-20'
    DO_21 = 'DO-21'
    DO_22 = 'DO-22'
    DO_23 = 'DO-23'
    DO_24 = 'DO-24'
    DO_25 = 'DO-25'
    DO_26 = 'DO-26'
    DO_27 = 'DO-27'
    DO_28 = 'DO-28'
    DO_29 = 'DO-29'
    DO_30 = 'DO-30'
    DO_31 = 'DO-31'
    DO_32 = 'DO-32'
    DO_33 = 'DO-33'
    DO_34 = 'DO-34'
    DO_35 = 'DO-35'
    DO_36 = 'DO-36'
    DO_37 = 'DO-37'
    DO_38 = 'DO-38'
    DO_39 = 'DO-39'
    DO_40 = 'DO-40'
    DO_41 = 'DO-41'
    DO_42 = 'DO-42'
    DZ_01 = 'DZ-01'
    DZ_02 = 'DZ-02'
    DZ_03 = 'DZ-03'
    DZ_04 = 'DZ-04'
    DZ_05 = 'DZ-05'
    DZ_06 = 'DZ-06'
    DZ_07 = 'DZ-07'
    DZ_08 = 'DZ-08'
    DZ_09 = 'DZ-09'
    DZ_10 = 'DZ-10'
    DZ_11 = 'DZ-11'
    DZ_12 = 'DZ-12'
    DZ_13 = 'DZ-13'
    DZ_14 = 'DZ-14'
    DZ_15 = 'DZ-15'
    DZ_16 = 'DZ-16'
    DZ_17 = 'DZ-17'
    DZ_18 = 'DZ-18'
    DZ_19 = 'DZ-19'
    DZ_20 = 'DZ-20'
    DZ_21 = 'DZ-21'
    DZ_22 = 'DZ-22'
    DZ_23 = 'DZ-23'
    DZ_24 = 'DZ-24'
    DZ_25 = 'DZ-25'
    DZ_26 = 'DZ-26'
    DZ_27 = 'DZ-27'
    DZ_28 = 'DZ-28'
    DZ_29 = 'DZ-29'
    DZ_30 = 'DZ-30'
    DZ_31 = 'DZ-31'
    DZ_32 = 'DZ-32'
    DZ_33 = 'DZ-33'
    DZ_34 = 'DZ-34'
    DZ_35 = 'DZ-35'
    DZ_36 = 'DZ-36'
    DZ_37 = 'DZ-37'
    DZ_38 = 'DZ-38'
    DZ_39 = 'DZ-39'
    DZ_40 = 'DZ-40'
    DZ_41 = 'DZ-41'
    DZ_42 = 'DZ-42'
    DZ_43 = 'DZ-43'
    DZ_44 = 'DZ-44'
    DZ_45 = 'DZ-45'
    DZ_46 = 'DZ-46'
    DZ_47 = 'DZ-47'
    DZ_48 = 'DZ-48'
    EC_A = 'EC-A'
    EC_B = 'EC-B'
    EC_C = 'EC-C'
    EC_D = 'EC-D'
    EC_E = 'EC-E'
    EC_F = 'EC-F'
    EC_G = 'EC-G'
    EC_H = 'EC-H'
    EC_I = 'EC-I'
    EC_L = 'EC-L'
    EC_M = 'EC-M'
    EC_N = 'EC-N'
    EC_O = 'EC-O'
    EC_P = 'EC-P'
    EC_R = 'EC-R'
    EC_S = 'EC-S'
    EC_SD = 'EC-SD'
    EC_SE = 'EC-SE'
    EC_T = 'EC-T'
    EC_U = 'EC-U'
    EC_W = 'EC-W'
    EC_X = 'EC-X'
    EC_Y = 'EC-Y'
    EC_Z = 'EC-Z'
    EE_130 = 'EE-130'
    EE_141 = 'EE-141'
    EE_142 = 'EE-142'
    EE_171 = 'EE-171'
    EE_184 = 'EE-184'
    EE_191 = 'EE-191'
    EE_198 = 'EE-198'
    EE_205 = 'EE-205'
    EE_214 = 'EE-214'
    EE_245 = 'EE-245'
    EE_247 = 'EE-247'
    EE_251 = 'EE-251'
    EE_255 = 'EE-255'
    EE_272 = 'EE-272'
    EE_283 = 'EE-283'
    EE_284 = 'EE-284'
    EE_291 = 'EE-291'
    EE_293 = 'EE-293'
    EE_296 = 'EE-296'
    EE_303 = 'EE-303'
    EE_305 = 'EE-305'
    EE_317 = 'EE-317'
    EE_321 = 'EE-321'
    EE_338 = 'EE-338'
    EE_353 = 'EE-353'
    EE_37 = 'EE-37'
    EE_39 = 'EE-39'
    EE_424 = 'EE-424'
    EE_430 = 'EE-430'
    EE_431 = 'EE-431'
    EE_432 = 'EE-432'
    EE_441 = 'EE-441'
    EE_442 = 'EE-442'
    EE_446 = 'EE-446'
    EE_45 = 'EE-45'
    EE_478 = 'EE-478'
    EE_480 = 'EE-480'
    EE_486 = 'EE-486'
    EE_50 = 'EE-50'
    EE_503 = 'EE-503'
    EE_511 = 'EE-511'
    EE_514 = 'EE-514'
    EE_52 = 'EE-52'
    EE_528 = 'EE-528'
    EE_557 = 'EE-557'
    EE_56 = 'EE-56'
    EE_567 = 'EE-567'
    EE_586 = 'EE-586'
    EE_60 = 'EE-60'
    EE_615 = 'EE-615'
    EE_618 = 'EE-618'
    EE_622 = 'EE-622'
    EE_624 = 'EE-624'
    EE_638 = 'EE-638'
    EE_64 = 'EE-64'
    EE_651 = 'EE-651'
    EE_653 = 'EE-653'
    EE_661 = 'EE-661'
    EE_663 = 'EE-663'
    EE_668 = 'EE-668'
    EE_68 = 'EE-68'
    EE_689 = 'EE-689'
    EE_698 = 'EE-698'
    EE_708 = 'EE-708'
    EE_71 = 'EE-71'
    EE_712 = 'EE-712'
    EE_714 = 'EE-714'
    EE_719 = 'EE-719'
    EE_726 = 'EE-726'
    EE_732 = 'EE-732'
    EE_735 = 'EE-735'
    EE_74 = 'EE-74'
    EE_784 = 'EE-784'
    EE_79 = 'EE-79'
    EE_792 = 'EE-792'
    EE_793 = 'EE-793'
    EE_796 = 'EE-796'
    EE_803 = 'EE-803'
    EE_809 = 'EE-809'
    EE_81 = 'EE-81'
    EE_824 = 'EE-824'
    EE_834 = 'EE-834'
    EE_84 = 'EE-84'
    EE_855 = 'EE-855'
    EE_87 = 'EE-87'
    EE_890 = 'EE-890'
    EE_897 = 'EE-897'
    EE_899 = 'EE-899'
    EE_901 = 'EE-901'
    EE_903 = 'EE-903'
    EE_907 = 'EE-907'
    EE_917 = 'EE-917'
    EE_919 = 'EE-919'
    EE_928 = 'EE-928'
    EG_ALX = 'EG-ALX'
    EG_ASN = 'EG-ASN'
    EG_AST = 'EG-AST'
    EG_BA = 'EG-BA'
    EG_BH = 'EG-BH'
    EG_BNS = 'EG-BNS'
    EG_C = 'EG-C'
    EG_DK = 'EG-DK'
    EG_DT = 'EG-DT'
    EG_FYM = 'EG-FYM'
    EG_GH = 'EG-GH'
    EG_GZ = 'EG-GZ'
    EG_IS = 'EG-IS'
    EG_JS = 'EG-JS'
    EG_KB = 'EG-KB'
    EG_KFS = 'EG-KFS'
    EG_KN = 'EG-KN'
    EG_LX = 'EG-LX'
    EG_MN = 'EG-MN'
    EG_MNF = 'EG-MNF'
    EG_MT = 'EG-MT'
    EG_PTS = 'EG-PTS'
    EG_SHG = 'EG-SHG'
    EG_SHR = 'EG-SHR'
    EG_SIN = 'EG-SIN'
    EG_SUZ = 'EG-SUZ'
    EG_WAD = 'EG-WAD'
    ER_AN = 'ER-AN'
    ER_DK = 'ER-DK'
    ER_DU = 'ER-DU'
    ER_GB = 'ER-GB'
    ER_MA = 'ER-MA'
    ER_SK = 'ER-SK'
    ES_A = 'ES-A'
    ES_AB = 'ES-AB'
    ES_AL = 'ES-AL'
    ES_AN = 'ES-AN'
    ES_AR = 'ES-AR'
    ES_AS = 'ES-AS'
    ES_AV = 'ES-AV'
    ES_B = 'ES-B'
    ES_BA = 'ES-BA'
    ES_BI = 'ES-BI'
    ES_BU = 'ES-BU'
    ES_C = 'ES-C'
    ES_CA = 'ES-CA'
    ES_CB = 'ES-CB'
    ES_CC = 'ES-CC'
    ES_CE = 'ES-CE'
    ES_CL = 'ES-CL'
    ES_CM = 'ES-CM'
    ES_CN = 'ES-CN'
    ES_CO = 'ES-CO'
    ES_CR = 'ES-CR'
    ES_CS = 'ES-CS'
    ES_CT = 'ES-CT'
    ES_CU = 'ES-CU'
    ES_EX = 'ES-EX'
    ES_GA = 'ES-GA'
    ES_GC = 'ES-GC'
    ES_GI = 'ES-GI'
    ES_GR = 'ES-GR'
    ES_GU = 'ES-GU'
    ES_H = 'ES-H'
    ES_HU = 'ES-HU'
    ES_IB = 'ES-IB'
    ES_J = 'ES-J'
    ES_L = 'ES-L'
    ES_LE = 'ES-LE'
    ES_LO = 'ES-LO'
    ES_LU = 'ES-LU'
    ES_M = 'ES-M'
    ES_MA = 'ES-MA'
    ES_MC = 'ES-MC'
    ES_MD = 'ES-MD'
    ES_ML = 'ES-ML'
    ES_MU = 'ES-MU'
    ES_NA = 'ES-NA'
    ES_NC = 'ES-NC'
    ES_O = 'ES-O'
    ES_OR = 'ES-OR'
    ES_P = 'ES-P'
    ES_PM = 'ES-PM'
    ES_PO = 'ES-PO'
    ES_PV = 'ES-PV'
    ES_RI = 'ES-RI'
    ES_S = 'ES-S'
    ES_SA = 'ES-SA'
    ES_SE = 'ES-SE'
    ES_SG = 'ES-SG'
    ES_SO = 'ES-SO'
    ES_SS = 'ES-SS'
    ES_T = 'ES-T'
    ES_TE = 'ES-TE'
    ES_TF = 'ES-TF'
    ES_TO = 'ES-TO'
    ES_V = 'ES-V'
    ES_VA = 'ES-VA'
    ES_VC = 'ES-VC'
    ES_VI = 'ES-VI'
    ES_Z = 'ES-Z'
    ES_ZA = 'ES-ZA'
    ET_AA = 'ET-AA'
    ET_AF = 'ET-AF'
    ET_AM = 'ET-AM'
    ET_BE = 'ET-BE'
    ET_DD = 'ET-DD'
    ET_GA = 'ET-GA'
    ET_HA = 'ET-HA'
    ET_OR = 'ET-OR'
    ET_SN = 'ET-SN'
    ET_SO = 'ET-SO'
    ET_TI = 'ET-TI'
    FI_01 = 'FI-01'
    FI_02 = 'FI-02'
    FI_03 = 'FI-03'
    FI_04 = 'FI-04'
    FI_05 = 'FI-05'
    FI_06 = 'FI-06'
    FI_07 = 'FI-07'
    FI_08 = 'FI-08'
    FI_09 = 'FI-09'
    FI_10 = 'FI-10'
    FI_11 = 'FI-11'
    FI_12 = 'FI-12'
    FI_13 = 'FI-13'
    FI_14 = 'FI-14'
    FI_15 = 'FI-15'
    FI_16 = 'FI-16'
    FI_17 = 'FI-17'
    FI_18 = 'FI-18'
    FI_19 = 'FI-19'
    FJ_01 = 'FJ-01'
    FJ_02 = 'FJ-02'
    FJ_03 = 'FJ-03'
    FJ_04 = 'FJ-04'
    FJ_05 = 'FJ-05'
    FJ_06 = 'FJ-06'
    FJ_07 = 'FJ-07'
    FJ_08 = 'FJ-08'
    FJ_09 = 'FJ-09'
    FJ_10 = 'FJ-10'
    FJ_11 = 'FJ-11'
    FJ_12 = 'FJ-12'
    FJ_13 = 'FJ-13'
    FJ_14 = 'FJ-14'
    FJ_C = 'FJ-C'
    FJ_E = 'FJ-E'
    FJ_N = 'FJ-N'
    FJ_R = 'FJ-R'
    FJ_W = 'FJ-W'
    FM_KSA = 'FM-KSA'
    FM_PNI = 'FM-PNI'
    FM_TRK = 'FM-TRK'
    FM_YAP = 'FM-YAP'
    FR_01 = 'FR-01'
    FR_02 = 'FR-02'
    FR_03 = 'FR-03'
    FR_04 = 'FR-04'
    FR_05 = 'FR-05'
    FR_06 = 'FR-06'
    FR_07 = 'FR-07'
    FR_08 = 'FR-08'
    FR_09 = 'FR-09'
    FR_10 = 'FR-10'
    FR_11 = 'FR-11'
    FR_12 = 'FR-12'
    FR_13 = 'FR-13'
    FR_14 = 'FR-14'
    FR_15 = 'FR-15'
    FR_16 = 'FR-16'
    FR_17 = 'FR-17'
    FR_18 = 'FR-18'
    FR_19 = 'FR-19'
    FR_20R = 'FR-20R'
    FR_21 = 'FR-21'
    FR_22 = 'FR-22'
    FR_23 = 'FR-23'
    FR_24 = 'FR-24'
    FR_25 = 'FR-25'
    FR_26 = 'FR-26'
    FR_27 = 'FR-27'
    FR_28 = 'FR-28'
    FR_29 = 'FR-29'
    FR_2A = 'FR-2A'
    FR_2B = 'FR-2B'
    FR_30 = 'FR-30'
    FR_31 = 'FR-31'
    FR_32 = 'FR-32'
    FR_33 = 'FR-33'
    FR_34 = 'FR-34'
    FR_35 = 'FR-35'
    FR_36 = 'FR-36'
    FR_37 = 'FR-37'
    FR_38 = 'FR-38'
    FR_39 = 'FR-39'
    FR_40 = 'FR-40'
    FR_41 = 'FR-41'
    FR_42 = 'FR-42'
    FR_43 = 'FR-43'
    FR_44 = 'FR-44'
    FR_45 = 'FR-45'
    FR_46 = 'FR-46'
    FR_47 = 'FR-47'
    FR_48 = 'FR-48'
    FR_49 = 'FR-49'
    FR_50 = 'FR-50'
    FR_51 = 'FR-51'
    FR_52 = 'FR-52'
    FR_53 = 'FR-53'
    FR_54 = 'FR-54'
    FR_55 = 'FR-55'
    FR_56 = 'FR-56'
    FR_57 = 'FR-57'
    FR_58 = 'FR-58'
    FR_59 = 'FR-59'
    FR_60 = 'FR-60'
    FR_61 = 'FR-61'
    FR_62 = 'FR-62'
    FR_63 = 'FR-63'
    FR_64 = 'FR-64'
    FR_65 = 'FR-65'
    FR_66 = 'FR-66'
    FR_67 = 'FR-67'
    FR_68 = 'FR-68'
    FR_69 = 'FR-69'
    FR_70 = 'FR-70'
    FR_71 = 'FR-71'
    FR_72 = 'FR-72'
    FR_73 = 'FR-73'
    FR_74 = 'FR-74'
    FR_75 = 'FR-75'
    FR_76 = 'FR-76'
    FR_77 = 'FR-77'
    FR_78 = 'FR-78'
    FR_79 = 'FR-79'
    FR_80 = 'FR-80'
    FR_81 = 'FR-81'
    FR_82 = 'FR-82'
    FR_83 = 'FR-83'
    FR_84 = 'FR-84'
    FR_85 = 'FR-85'
    FR_86 = 'FR-86'
    FR_87 = 'FR-87'
    FR_88 = 'FR-88'
    FR_89 = 'FR-89'
    FR_90 = 'FR-90'
    FR_91 = 'FR-91'
    FR_92 = 'FR-92'
    FR_93 = 'FR-93'
    FR_94 = 'FR-94'
    FR_95 = 'FR-95'
    FR_971 = 'FR-971'
    FR_972 = 'FR-972'
    FR_973 = 'FR-973'
    FR_974 = 'FR-974'
    FR_976 = 'FR-976'
    FR_ARA = 'FR-ARA'
    FR_BFC = 'FR-BFC'
    FR_BL = 'FR-BL'
    FR_BRE = 'FR-BRE'
    FR_CP = 'FR-CP'
    FR_CVL = 'FR-CVL'
    FR_GES = 'FR-GES'
    FR_GF = 'FR-GF'
    FR_GP = 'FR-GP'
    FR_HDF = 'FR-HDF'
    FR_IDF = 'FR-IDF'
    FR_MF = 'FR-MF'
    FR_MQ = 'FR-MQ'
    FR_NAQ = 'FR-NAQ'
    FR_NC = 'FR-NC'
    FR_NOR = 'FR-NOR'
    FR_OCC = 'FR-OCC'
    FR_PAC = 'FR-PAC'
    FR_PDL = 'FR-PDL'
    FR_PF = 'FR-PF'
    FR_PM = 'FR-PM'
    FR_RE = 'FR-RE'
    FR_TF = 'FR-TF'
    FR_WF = 'FR-WF'
    FR_YT = 'FR-YT'
    GA_1 = 'GA-1'
    GA_2 = 'GA-2'
    GA_3 = 'GA-3'
    GA_4 = 'GA-4'
    GA_5 = 'GA-5'
    GA_6 = 'GA-6'
    GA_7 = 'GA-7'
    GA_8 = 'GA-8'
    GA_9 = 'GA-9'
    GB_ABC = 'GB-ABC'
    GB_ABD = 'GB-ABD'
    GB_ABE = 'GB-ABE'
    GB_AGB = 'GB-AGB'
    GB_AGY = 'GB-AGY'
    GB_AND = 'GB-AND'
    GB_ANN = 'GB-ANN'
    GB_ANS = 'GB-ANS'
    GB_BAS = 'GB-BAS'
    GB_BBD = 'GB-BBD'
    GB_BCP = 'GB-BCP'
    GB_BDF = 'GB-BDF'
    GB_BDG = 'GB-BDG'
    GB_BEN = 'GB-BEN'
    GB_BEX = 'GB-BEX'
    GB_BFS = 'GB-BFS'
    GB_BGE = 'GB-BGE'
    GB_BGW = 'GB-BGW'
    GB_BIR = 'GB-BIR'
    GB_BKM = 'GB-BKM'
    GB_BNE = 'GB-BNE'
    GB_BNH = 'GB-BNH'
    GB_BNS = 'GB-BNS'
    GB_BOL = 'GB-BOL'
    GB_BPL = 'GB-BPL'
    GB_BRC = 'GB-BRC'
    GB_BRD = 'GB-BRD'
    GB_BRY = 'GB-BRY'
    GB_BST = 'GB-BST'
    GB_BUR = 'GB-BUR'
    GB_CAM = 'GB-CAM'
    GB_CAY = 'GB-CAY'
    GB_CBF = 'GB-CBF'
    GB_CCG = 'GB-CCG'
    GB_CGN = 'GB-CGN'
    GB_CHE = 'GB-CHE'
    GB_CHW = 'GB-CHW'
    GB_CLD = 'GB-CLD'
    GB_CLK = 'GB-CLK'
    GB_CMA = 'GB-CMA'
    GB_CMD = 'GB-CMD'
    GB_CMN = 'GB-CMN'
    GB_CON = 'GB-CON'
    GB_COV = 'GB-COV'
    GB_CRF = 'GB-CRF'
    GB_CRY = 'GB-CRY'
    GB_CWY = 'GB-CWY'
    GB_DAL = 'GB-DAL'
    GB_DBY = 'GB-DBY'
    GB_DEN = 'GB-DEN'
    GB_DER = 'GB-DER'
    GB_DEV = 'GB-DEV'
    GB_DGY = 'GB-DGY'
    GB_DNC = 'GB-DNC'
    GB_DND = 'GB-DND'
    GB_DOR = 'GB-DOR'
    GB_DRS = 'GB-DRS'
    GB_DUD = 'GB-DUD'
    GB_DUR = 'GB-DUR'
    GB_EAL = 'GB-EAL'
    GB_EAY = 'GB-EAY'
    GB_EDH = 'GB-EDH'
    GB_EDU = 'GB-EDU'
    GB_ELN = 'GB-ELN'
    GB_ELS = 'GB-ELS'
    GB_ENF = 'GB-ENF'
    GB_ENG = 'GB-ENG'
    GB_ERW = 'GB-ERW'
    GB_ERY = 'GB-ERY'
    GB_ESS = 'GB-ESS'
    GB_ESX = 'GB-ESX'
    GB_FAL = 'GB-FAL'
    GB_FIF = 'GB-FIF'
    GB_FLN = 'GB-FLN'
    GB_FMO = 'GB-FMO'
    GB_GAT = 'GB-GAT'
    GB_GLG = 'GB-GLG'
    GB_GLS = 'GB-GLS'
    GB_GRE = 'GB-GRE'
    GB_GWN = 'GB-GWN'
    GB_HAL = 'GB-HAL'
    GB_HAM = 'GB-HAM'
    GB_HAV = 'GB-HAV'
    GB_HCK = 'GB-HCK'
    GB_HEF = 'GB-HEF'
    GB_HIL = 'GB-HIL'
    GB_HLD = 'GB-HLD'
    GB_HMF = 'GB-HMF'
    GB_HNS = 'GB-HNS'
    GB_HPL = 'GB-HPL'
    GB_HRT = 'GB-HRT'
    GB_HRW = 'GB-HRW'
    GB_HRY = 'GB-HRY'
    GB_IOS = 'GB-IOS'
    GB_IOW = 'GB-IOW'
    GB_ISL = 'GB-ISL'
    GB_IVC = 'GB-IVC'
    GB_KEC = 'GB-KEC'
    GB_KEN = 'GB-KEN'
    GB_KHL = 'GB-KHL'
    GB_KIR = 'GB-KIR'
    GB_KTT = 'GB-KTT'
    GB_KWL = 'GB-KWL'
    GB_LAN = 'GB-LAN'
    GB_LBC = 'GB-LBC'
    GB_LBH = 'GB-LBH'
    GB_LCE = 'GB-LCE'
    GB_LDS = 'GB-LDS'
    GB_LEC = 'GB-LEC'
    GB_LEW = 'GB-LEW'
    GB_LIN = 'GB-LIN'
    GB_LIV = 'GB-LIV'
    GB_LND = 'GB-LND'
    GB_LUT = 'GB-LUT'
    GB_MAN = 'GB-MAN'
    GB_MDB = 'GB-MDB'
    GB_MDW = 'GB-MDW'
    GB_MEA = 'GB-MEA'
    GB_MIK = 'GB-MIK'
    GB_MLN = 'GB-MLN'
    GB_MON = 'GB-MON'
    GB_MRT = 'GB-MRT'
    GB_MRY = 'GB-MRY'
    GB_MTY = 'GB-MTY'
    GB_MUL = 'GB-MUL'
    GB_NAY = 'GB-NAY'
    GB_NBL = 'GB-NBL'
    GB_NEL = 'GB-NEL'
    GB_NET = 'GB-NET'
    GB_NFK = 'GB-NFK'
    GB_NGM = 'GB-NGM'
    GB_NIR = 'GB-NIR'
    GB_NLK = 'GB-NLK'
    GB_NLN = 'GB-NLN'
    GB_NMD = 'GB-NMD'
    GB_NSM = 'GB-NSM'
    GB_NTH = 'GB-NTH'
    GB_NTL = 'GB-NTL'
    GB_NTT = 'GB-NTT'
    GB_NTY = 'GB-NTY'
    GB_NWM = 'GB-NWM'
    GB_NWP = 'GB-NWP'
    GB_NYK = 'GB-NYK'
    GB_OLD = 'GB-OLD'
    GB_ORK = 'GB-ORK'
    GB_OXF = 'GB-OXF'
    GB_PEM = 'GB-PEM'
    GB_PKN = 'GB-PKN'
    GB_PLY = 'GB-PLY'
    GB_POR = 'GB-POR'
    GB_POW = 'GB-POW'
    GB_PTE = 'GB-PTE'
    GB_RCC = 'GB-RCC'
    GB_RCH = 'GB-RCH'
    GB_RCT = 'GB-RCT'
    GB_RDB = 'GB-RDB'
    GB_RDG = 'GB-RDG'
    GB_RFW = 'GB-RFW'
    GB_RIC = 'GB-RIC'
    GB_ROT = 'GB-ROT'
    GB_RUT = 'GB-RUT'
    GB_SAW = 'GB-SAW'
    GB_SAY = 'GB-SAY'
    GB_SCB = 'GB-SCB'
    GB_SCT = 'GB-SCT'
    GB_SFK = 'GB-SFK'
    GB_SFT = 'GB-SFT'
    GB_SGC = 'GB-SGC'
    GB_SHF = 'GB-SHF'
    GB_SHN = 'GB-SHN'
    GB_SHR = 'GB-SHR'
    GB_SKP = 'GB-SKP'
    GB_SLF = 'GB-SLF'
    GB_SLG = 'GB-SLG'
    GB_SLK = 'GB-SLK'
    GB_SND = 'GB-SND'
    GB_SOL = 'GB-SOL'
    GB_SOM = 'GB-SOM'
    GB_SOS = 'GB-SOS'
    GB_SRY = 'GB-SRY'
    GB_STE = 'GB-STE'
    GB_STG = 'GB-STG'
    GB_STH = 'GB-STH'
    GB_STN = 'GB-STN'
    GB_STS = 'GB-STS'
    GB_STT = 'GB-STT'
    GB_STY = 'GB-STY'
    GB_SWA = 'GB-SWA'
    GB_SWD = 'GB-SWD'
    GB_SWK = 'GB-SWK'
    GB_TAM = 'GB-TAM'
    GB_TFW = 'GB-TFW'
    GB_THR = 'GB-THR'
    GB_TOB = 'GB-TOB'
    GB_TOF = 'GB-TOF'
    GB_TRF = 'GB-TRF'
    GB_TWH = 'GB-TWH'
    GB_VGL = 'GB-VGL'
    GB_WAR = 'GB-WAR'
    GB_WBK = 'GB-WBK'
    GB_WDU = 'GB-WDU'
    GB_WFT = 'GB-WFT'
    GB_WGN = 'GB-WGN'
    GB_WIL = 'GB-WIL'
    GB_WKF = 'GB-WKF'
    GB_WLL = 'GB-WLL'
    GB_WLN = 'GB-WLN'
    GB_WLS = 'GB-WLS'
    GB_WLV = 'GB-WLV'
    GB_WND = 'GB-WND'
    GB_WNM = 'GB-WNM'
    GB_WOK = 'GB-WOK'
    GB_WOR = 'GB-WOR'
    GB_WRL = 'GB-WRL'
    GB_WRT = 'GB-WRT'
    GB_WRX = 'GB-WRX'
    GB_WSM = 'GB-WSM'
    GB_WSX = 'GB-WSX'
    GB_YOR = 'GB-YOR'
    GB_ZET = 'GB-ZET'
    GD_01 = 'GD-01'
    GD_02 = 'GD-02'
    GD_03 = 'GD-03'
    GD_04 = 'GD-04'
    GD_05 = 'GD-05'
    GD_06 = 'GD-06'
    GD_10 = 'GD-10'
    GE_AB = 'GE-AB'
    GE_AJ = 'GE-AJ'
    GE_GU = 'GE-GU'
    GE_IM = 'GE-IM'
    GE_KA = 'GE-KA'
    GE_KK = 'GE-KK'
    GE_MM = 'GE-MM'
    GE_RL = 'GE-RL'
    GE_SJ = 'GE-SJ'
    GE_SK = 'GE-SK'
    GE_SZ = 'GE-SZ'
    GE_TB = 'GE-TB'
    GH_AA = 'GH-AA'
    GH_AF = 'GH-AF'
    GH_AH = 'GH-AH'
    GH_BE = 'GH-BE'
    GH_BO = 'GH-BO'
    GH_CP = 'GH-CP'
    GH_EP = 'GH-EP'
    GH_NE = 'GH-NE'
    GH_NP = 'GH-NP'
    GH_OT = 'GH-OT'
    GH_SV = 'GH-SV'
    GH_TV = 'GH-TV'
    GH_UE = 'GH-UE'
    GH_UW = 'GH-UW'
    GH_WN = 'GH-WN'
    GH_WP = 'GH-WP'
    GL_AV = 'GL-AV'
    GL_KU = 'GL-KU'
    GL_QE = 'GL-QE'
    GL_QT = 'GL-QT'
    GL_SM = 'GL-SM'
    GM_B = 'GM-B'
    GM_L = 'GM-L'
    GM_M = 'GM-M'
    GM_N = 'GM-N'
    GM_U = 'GM-U'
    GM_W = 'GM-W'
    GN_B = 'GN-B'
    GN_BE = 'GN-BE'
    GN_BF = 'GN-BF'
    GN_BK = 'GN-BK'
    GN_C = 'GN-C'
    GN_CO = 'GN-CO'
    GN_D = 'GN-D'
    GN_DB = 'GN-DB'
    GN_DI = 'GN-DI'
    GN_DL = 'GN-DL'
    GN_DU = 'GN-DU'
    GN_F = 'GN-F'
    GN_FA = 'GN-FA'
    GN_FO = 'GN-FO'
    GN_FR = 'GN-FR'
    GN_GA = 'GN-GA'
    GN_GU = 'GN-GU'
    GN_K = 'GN-K'
    GN_KA = 'GN-KA'
    GN_KB = 'GN-KB'
    GN_KD = 'GN-KD'
    GN_KE = 'GN-KE'
    GN_KN = 'GN-KN'
    GN_KO = 'GN-KO'
    GN_KS = 'GN-KS'
    GN_L = 'GN-L'
    GN_LA = 'GN-LA'
    GN_LE = 'GN-LE'
    GN_LO = 'GN-LO'
    GN_M = 'GN-M'
    GN_MC = 'GN-MC'
    GN_MD = 'GN-MD'
    GN_ML = 'GN-ML'
    GN_MM = 'GN-MM'
    GN_N = 'GN-N'
    GN_NZ = 'GN-NZ'
    GN_PI = 'GN-PI'
    GN_SI = 'GN-SI'
    GN_TE = 'GN-TE'
    GN_TO = 'GN-TO'
    GN_YO = 'GN-YO'
    GQ_AN = 'GQ-AN'
    GQ_BN = 'GQ-BN'
    GQ_BS = 'GQ-BS'
    GQ_C = 'GQ-C'
    GQ_CS = 'GQ-CS'
    GQ_DJ = 'GQ-DJ'
    GQ_I = 'GQ-I'
    GQ_KN = 'GQ-KN'
    GQ_LI = 'GQ-LI'
    GQ_WN = 'GQ-WN'
    GR_69 = 'GR-69'
    GR_A = 'GR-A'
    GR_B = 'GR-B'
    GR_C = 'GR-C'
    GR_D = 'GR-D'
    GR_E = 'GR-E'
    GR_F = 'GR-F'
    GR_G = 'GR-G'
    GR_H = 'GR-H'
    GR_I = 'GR-I'
    GR_J = 'GR-J'
    GR_K = 'GR-K'
    GR_L = 'GR-L'
    GR_M = 'GR-M'
    GT_AV = 'GT-AV'
    GT_BV = 'GT-BV'
    GT_CM = 'GT-CM'
    GT_CQ = 'GT-CQ'
    GT_ES = 'GT-ES'
    GT_GU = 'GT-GU'
    GT_HU = 'GT-HU'
    GT_IZ = 'GT-IZ'
    GT_JA = 'GT-JA'
    GT_JU = 'GT-JU'
    GT_PE = 'GT-PE'
    GT_PR = 'GT-PR'
    GT_QC = 'GT-QC'
    GT_QZ = 'GT-QZ'
    GT_RE = 'GT-RE'
    GT_SA = 'GT-SA'
    GT_SM = 'GT-SM'
    GT_SO = 'GT-SO'
    GT_SR = 'GT-SR'
    GT_SU = 'GT-SU'
    GT_TO = 'GT-TO'
    GT_ZA = 'GT-ZA'
    GW_BA = 'GW-BA'
    GW_BL = 'GW-BL'
    GW_BM = 'GW-BM'
    GW_BS = 'GW-BS'
    GW_CA = 'GW-CA'
    GW_GA = 'GW-GA'
    GW_L = 'GW-L'
    GW_N = 'GW-N'
    GW_OI = 'GW-OI'
    GW_QU = 'GW-QU'
    GW_S = 'GW-S'
    GW_TO = 'GW-TO'
    GY_BA = 'GY-BA'
    GY_CU = 'GY-CU'
    GY_DE = 'GY-DE'
    GY_EB = 'GY-EB'
    GY_ES = 'GY-ES'
    GY_MA = 'GY-MA'
    GY_PM = 'GY-PM'
    GY_PT = 'GY-PT'
    GY_UD = 'GY-UD'
    GY_UT = 'GY-UT'
    HN_AT = 'HN-AT'
    HN_CH = 'HN-CH'
    HN_CL = 'HN-CL'
    HN_CM = 'HN-CM'
    HN_CP = 'HN-CP'
    HN_CR = 'HN-CR'
    HN_EP = 'HN-EP'
    HN_FM = 'HN-FM'
    HN_GD = 'HN-GD'
    HN_IB = 'HN-IB'
    HN_IN = 'HN-IN'
    HN_LE = 'HN-LE'
    HN_LP = 'HN-LP'
    HN_OC = 'HN-OC'
    HN_OL = 'HN-OL'
    HN_SB = 'HN-SB'
    HN_VA = 'HN-VA'
    HN_YO = 'HN-YO'
    HR_01 = 'HR-01'
    HR_02 = 'HR-02'
    HR_03 = 'HR-03'
    HR_04 = 'HR-04'
    HR_05 = 'HR-05'
    HR_06 = 'HR-06'
    HR_07 = 'HR-07'
    HR_08 = 'HR-08'
    HR_09 = 'HR-09'
    HR_10 = 'HR-10'
    HR_11 = 'HR-11'
    HR_12 = 'HR-12'
    HR_13 = 'HR-13'
    HR_14 = 'HR-14'
    HR_15 = 'HR-15'
    HR_16 = 'HR-16'
    HR_17 = 'HR-17'
    HR_18 = 'HR-18'
    HR_19 = 'HR-19'
    HR_20 = 'HR-20'
    HR_21 = 'HR-21'
    HT_AR = 'HT-AR'
    HT_CE = 'HT-CE'
    HT_GA = 'HT-GA'
    HT_ND = 'HT-ND'
    HT_NE = 'HT-NE'
    HT_NI = 'HT-NI'
    HT_NO = 'HT-NO'
    HT_OU = 'HT-OU'
    HT_SD = 'HT-SD'
    HT_SE = 'HT-SE'
    HU_BA = 'HU-BA'
    HU_BC = 'HU-BC'
    HU_BE = 'HU-BE'
    HU_BK = 'HU-BK'
    HU_BU = 'HU-BU'
    HU_BZ = 'HU-BZ'
    HU_CS = 'HU-CS'
    HU_DE = 'HU-DE'
    HU_DU = 'HU-DU'
    HU_EG = 'HU-EG'
    HU_ER = 'HU-ER'
    HU_FE = 'HU-FE'
    HU_GS = 'HU-GS'
    HU_GY = 'HU-GY'
    HU_HB = 'HU-HB'
    HU_HE = 'HU-HE'
    HU_HV = 'HU-HV'
    HU_JN = 'HU-JN'
    HU_KE = 'HU-KE'
    HU_KM = 'HU-KM'
    HU_KV = 'HU-KV'
    HU_MI = 'HU-MI'
    HU_NK = 'HU-NK'
    HU_NO = 'HU-NO'
    HU_NY = 'HU-NY'
    HU_PE = 'HU-PE'
    HU_PS = 'HU-PS'
    HU_SD = 'HU-SD'
    HU_SF = 'HU-SF'
    HU_SH = 'HU-SH'
    HU_SK = 'HU-SK'
    HU_SN = 'HU-SN'
    HU_SO = 'HU-SO'
    HU_SS = 'HU-SS'
    HU_ST = 'HU-ST'
    HU_SZ = 'HU-SZ'
    HU_TB = 'HU-TB'
    HU_TO = 'HU-TO'
    HU_VA = 'HU-VA'
    HU_VE = 'HU-VE'
    HU_VM = 'HU-VM'
    HU_ZA = 'HU-ZA'
    HU_ZE = 'HU-ZE'
    ID_AC = 'ID-AC'
    ID_BA = 'ID-BA'
    ID_BB = 'ID-BB'
    ID_BE = 'ID-BE'
    ID_BT = 'ID-BT'
    ID_GO = 'ID-GO'
    ID_JA = 'ID-JA'
    ID_JB = 'ID-JB'
    ID_JI = 'ID-JI'
    ID_JK = 'ID-JK'
    ID_JT = 'ID-JT'
    ID_JW = 'ID-JW'
    ID_KA = 'ID-KA'
    ID_KB = 'ID-KB'
    ID_KI = 'ID-KI'
    ID_KR = 'ID-KR'
    ID_KS = 'ID-KS'
    ID_KT = 'ID-KT'
    ID_KU = 'ID-KU'
    ID_LA = 'ID-LA'
    ID_MA = 'ID-MA'
    ID_ML = 'ID-ML'
    ID_MU = 'ID-MU'
    ID_NB = 'ID-NB'
    ID_NT = 'ID-NT'
    ID_NU = 'ID-NU'
    ID_PA = 'ID-PA'
    ID_PB = 'ID-PB'
    ID_PP = 'ID-PP'
    ID_RI = 'ID-RI'
    ID_SA = 'ID-SA'
    ID_SB = 'ID-SB'
    ID_SG = 'ID-SG'
    ID_SL = 'ID-SL'
    ID_SM = 'ID-SM'
    ID_SN = 'ID-SN'
    ID_SR = 'ID-SR'
    ID_SS = 'ID-SS'
    ID_ST = 'ID-ST'
    ID_SU = 'ID-SU'
    ID_YO = 'ID-YO'
    IE_C = 'IE-C'
    IE_CE = 'IE-CE'
    IE_CN = 'IE-CN'
    IE_CO = 'IE-CO'
    IE_CW = 'IE-CW'
    IE_D = 'IE-D'
    IE_DL = 'IE-DL'
    IE_G = 'IE-G'
    IE_KE = 'IE-KE'
    IE_KK = 'IE-KK'
    IE_KY = 'IE-KY'
    IE_L = 'IE-L'
    IE_LD = 'IE-LD'
    IE_LH = 'IE-LH'
    IE_LK = 'IE-LK'
    IE_LM = 'IE-LM'
    IE_LS = 'IE-LS'
    IE_M = 'IE-M'
    IE_MH = 'IE-MH'
    IE_MN = 'IE-MN'
    IE_MO = 'IE-MO'
    IE_OY = 'IE-OY'
    IE_RN = 'IE-RN'
    IE_SO = 'IE-SO'
    IE_TA = 'IE-TA'
    IE_U = 'IE-U'
    IE_WD = 'IE-WD'
    IE_WH = 'IE-WH'
    IE_WW = 'IE-WW'
    IE_WX = 'IE-WX'
    IL_D = 'IL-D'
    IL_HA = 'IL-HA'
    IL_JM = 'IL-JM'
    IL_M = 'IL-M'
    IL_TA = 'IL-TA'
    IL_Z = 'IL-Z'
    IN_AN = 'IN-AN'
    IN_AP = 'IN-AP'
    IN_AR = 'IN-AR'
    IN_AS = 'IN-AS'
    IN_BR = 'IN-BR'
    IN_CH = 'IN-CH'
    IN_CT = 'IN-CT'
    IN_DH = 'IN-DH'
    IN_DL = 'IN-DL'
    IN_GA = 'IN-GA'
    IN_GJ = 'IN-GJ'
    IN_HP = 'IN-HP'
    IN_HR = 'IN-HR'
    IN_JH = 'IN-JH'
    IN_JK = 'IN-JK'
    IN_KA = 'IN-KA'
    IN_KL = 'IN-KL'
    IN_LA = 'IN-LA'
    IN_LD = 'IN-LD'
    IN_MH = 'IN-MH'
    IN_ML = 'IN-ML'
    IN_MN = 'IN-MN'
    IN_MP = 'IN-MP'
    IN_MZ = 'IN-MZ'
    IN_NL = 'IN-NL'
    IN_OR = 'IN-OR'
    IN_PB = 'IN-PB'
    IN_PY = 'IN-PY'
    IN_RJ = 'IN-RJ'
    IN_SK = 'IN-SK'
    IN_TG = 'IN-TG'
    IN_TN = 'IN-TN'
    IN_TR = 'IN-TR'
    IN_UP = 'IN-UP'
    IN_UT = 'IN-UT'
    IN_WB = 'IN-WB'
    IQ_AN = 'IQ-AN'
    IQ_AR = 'IQ-AR'
    IQ_BA = 'IQ-BA'
    IQ_BB = 'IQ-BB'
    IQ_BG = 'IQ-BG'
    IQ_DA = 'IQ-DA'
    IQ_DI = 'IQ-DI'
    IQ_DQ = 'IQ-DQ'
    IQ_KA = 'IQ-KA'
    IQ_KI = 'IQ-KI'
    IQ_MA = 'IQ-MA'
    IQ_MU = 'IQ-MU'
    IQ_NA = 'IQ-NA'
    IQ_NI = 'IQ-NI'
    IQ_QA = 'IQ-QA'
    IQ_SD = 'IQ-SD'
    IQ_SU = 'IQ-SU'
    IQ_WA = 'IQ-WA'
    IR_00 = 'IR-00'
    IR_01 = 'IR-01'
    IR_02 = 'IR-02'
    IR_03 = 'IR-03'
    IR_04 = 'IR-04'
    IR_05 = 'IR-05'
    IR_06 = 'IR-06'
    IR_07 = 'IR-07'
    IR_08 = 'IR-08'
    IR_09 = 'IR-09'
    IR_10 = 'IR-10'
    IR_11 = 'IR-11'
    IR_12 = 'IR-12'
    IR_13 = 'IR-13'
    IR_14 = 'IR-14'
    IR_15 = 'IR-15'
    IR_16 = 'IR-16'
    IR_17 = 'IR-17'
    IR_18 = 'IR-18'
    IR_19 = 'IR-19'
    IR_20 = 'IR-20'
    IR_21 = 'IR-21'
    IR_22 = 'IR-22'
    IR_23 = 'IR-23'
    IR_24 = 'IR-24'
    IR_25 = 'IR-25'
    IR_26 = 'IR-26'
    IR_27 = 'IR-27'
    IR_28 = 'IR-28'
    IR_29 = 'IR-29'
    IR_30 = 'IR-30'
    IS_1 = 'IS-1'
    IS_2 = 'IS-2'
    IS_3 = 'IS-3'
    IS_4 = 'IS-4'
    IS_5 = 'IS-5'
    IS_6 = 'IS-6'
    IS_7 = 'IS-7'
    IS_8 = 'IS-8'
    IS_AKH = 'IS-AKH'
    IS_AKN = 'IS-AKN'
    IS_AKU = 'IS-AKU'
    IS_ARN = 'IS-ARN'
    IS_ASA = 'IS-ASA'
    IS_BFJ = 'IS-BFJ'
    IS_BLA = 'IS-BLA'
    IS_BLO = 'IS-BLO'
    IS_BOG = 'IS-BOG'
    IS_BOL = 'IS-BOL'
    IS_DAB = 'IS-DAB'
    IS_DAV = 'IS-DAV'
    IS_DJU = 'IS-DJU'
    IS_EOM = 'IS-EOM'
    IS_EYF = 'IS-EYF'
    IS_FJD = 'IS-FJD'
    IS_FJL = 'IS-FJL'
    IS_FLA = 'IS-FLA'
    IS_FLD = 'IS-FLD'
    IS_FLR = 'IS-FLR'
    IS_GAR = 'IS-GAR'
    IS_GOG = 'IS-GOG'
    IS_GRN = 'IS-GRN'
    IS_GRU = 'IS-GRU'
    IS_GRY = 'IS-GRY'
    IS_HAF = 'IS-HAF'
    IS_HEL = 'IS-HEL'
    IS_HRG = 'IS-HRG'
    IS_HRU = 'IS-HRU'
    IS_HUT = 'IS-HUT'
    IS_HUV = 'IS-HUV'
    IS_HVA = 'IS-HVA'
    IS_HVE = 'IS-HVE'
    IS_ISA = 'IS-ISA'
    IS_KAL = 'IS-KAL'
    IS_KJO = 'IS-KJO'
    IS_KOP = 'IS-KOP'
    IS_LAN = 'IS-LAN'
    IS_MOS = 'IS-MOS'
    IS_MYR = 'IS-MYR'
    IS_NOR = 'IS-NOR'
    IS_RGE = 'IS-RGE'
    IS_RGY = 'IS-RGY'
    IS_RHH = 'IS-RHH'
    IS_RKN = 'IS-RKN'
    IS_RKV = 'IS-RKV'
    IS_SBH = 'IS-SBH'
    IS_SBT = 'IS-SBT'
    IS_SDN = 'IS-SDN'
    IS_SDV = 'IS-SDV'
    IS_SEL = 'IS-SEL'
    IS_SEY = 'IS-SEY'
    IS_SFA = 'IS-SFA'
    IS_SHF = 'IS-SHF'
    IS_SKF = 'IS-SKF'
    IS_SKG = 'IS-SKG'
    IS_SKO = 'IS-SKO'
    IS_SKU = 'IS-SKU'
    IS_SNF = 'IS-SNF'
    IS_SOG = 'IS-SOG'
    IS_SOL = 'IS-SOL'
    IS_SSF = 'IS-SSF'
    IS_SSS = 'IS-SSS'
    IS_STR = 'IS-STR'
    IS_STY = 'IS-STY'
    IS_SVG = 'IS-SVG'
    IS_TAL = 'IS-TAL'
    IS_THG = 'IS-THG'
    IS_TJO = 'IS-TJO'
    IS_VEM = 'IS-VEM'
    IS_VER = 'IS-VER'
    IS_VOP = 'IS-VOP'
    IT_21 = 'IT-21'
    IT_23 = 'IT-23'
    IT_25 = 'IT-25'
    IT_32 = 'IT-32'
    IT_34 = 'IT-34'
    IT_36 = 'IT-36'
    IT_42 = 'IT-42'
    IT_45 = 'IT-45'
    IT_52 = 'IT-52'
    IT_55 = 'IT-55'
    IT_57 = 'IT-57'
    IT_62 = 'IT-62'
    IT_65 = 'IT-65'
    IT_67 = 'IT-67'
    IT_72 = 'IT-72'
    IT_75 = 'IT-75'
    IT_77 = 'IT-77'
    IT_78 = 'IT-78'
    IT_82 = 'IT-82'
    IT_88 = 'IT-88'
    IT_AG = 'IT-AG'
    IT_AL = 'IT-AL'
    IT_AN = 'IT-AN'
    IT_AP = 'IT-AP'
    IT_AQ = 'IT-AQ'
    IT_AR = 'IT-AR'
    IT_AT = 'IT-AT'
    IT_AV = 'IT-AV'
    IT_BA = 'IT-BA'
    IT_BG = 'IT-BG'
    IT_BI = 'IT-BI'
    IT_BL = 'IT-BL'
    IT_BN = 'IT-BN'
    IT_BO = 'IT-BO'
    IT_BR = 'IT-BR'
    IT_BS = 'IT-BS'
    IT_BT = 'IT-BT'
    IT_BZ = 'IT-BZ'
    IT_CA = 'IT-CA'
    IT_CB = 'IT-CB'
    IT_CE = 'IT-CE'
    IT_CH = 'IT-CH'
    IT_CL = 'IT-CL'
    IT_CN = 'IT-CN'
    IT_CO = 'IT-CO'
    IT_CR = 'IT-CR'
    IT_CS = 'IT-CS'
    IT_CT = 'IT-CT'
    IT_CZ = 'IT-CZ'
    IT_EN = 'IT-EN'
    IT_FC = 'IT-FC'
    IT_FE = 'IT-FE'
    IT_FG = 'IT-FG'
    IT_FI = 'IT-FI'
    IT_FM = 'IT-FM'
    IT_FR = 'IT-FR'
    IT_GE = 'IT-GE'
    IT_GO = 'IT-GO'
    IT_GR = 'IT-GR'
    IT_IM = 'IT-IM'
    IT_IS = 'IT-IS'
    IT_KR = 'IT-KR'
    IT_LC = 'IT-LC'
    IT_LE = 'IT-LE'
    IT_LI = 'IT-LI'
    IT_LO = 'IT-LO'
    IT_LT = 'IT-LT'
    IT_LU = 'IT-LU'
    IT_MB = 'IT-MB'
    IT_MC = 'IT-MC'
    IT_ME = 'IT-ME'
    IT_MI = 'IT-MI'
    IT_MN = 'IT-MN'
    IT_MO = 'IT-MO'
    IT_MS = 'IT-MS'
    IT_MT = 'IT-MT'
    IT_NA = 'IT-NA'
    IT_NO = 'IT-NO'
    IT_NU = 'IT-NU'
    IT_OR = 'IT-OR'
    IT_PA = 'IT-PA'
    IT_PC = 'IT-PC'
    IT_PD = 'IT-PD'
    IT_PE = 'IT-PE'
    IT_PG = 'IT-PG'
    IT_PI = 'IT-PI'
    IT_PN = 'IT-PN'
    IT_PO = 'IT-PO'
    IT_PR = 'IT-PR'
    IT_PT = 'IT-PT'
    IT_PU = 'IT-PU'
    IT_PV = 'IT-PV'
    IT_PZ = 'IT-PZ'
    IT_RA = 'IT-RA'
    IT_RC = 'IT-RC'
    IT_RE = 'IT-RE'
    IT_RG = 'IT-RG'
    IT_RI = 'IT-RI'
    IT_RM = 'IT-RM'
    IT_RN = 'IT-RN'
    IT_RO = 'IT-RO'
    IT_SA = 'IT-SA'
    IT_SI = 'IT-SI'
    IT_SO = 'IT-SO'
    IT_SP = 'IT-SP'
    IT_SR = 'IT-SR'
    IT_SS = 'IT-SS'
    IT_SU = 'IT-SU'
    IT_SV = 'IT-SV'
    IT_TA = 'IT-TA'
    IT_TE = 'IT-TE'
    IT_TN = 'IT-TN'
    IT_TO = 'IT-TO'
    IT_TP = 'IT-TP'
    IT_TR = 'IT-TR'
    IT_TS = 'IT-TS'
    IT_TV = 'IT-TV'
    IT_UD = 'IT-UD'
    IT_VA = 'IT-VA'
    IT_VB = 'IT-VB'
    IT_VC = 'IT-VC'
    IT_VE = 'IT-VE'
    IT_VI = 'IT-VI'
    IT_VR = 'IT-VR'
    IT_VT = 'IT-VT'
    IT_VV = 'IT-VV'
    JM_01 = 'JM-01'
    JM_02 = 'JM-02'
    JM_03 = 'JM-03'
    JM_04 = 'JM-04'
    JM_05 = 'JM-05'
    JM_06 = 'JM-06'
    JM_07 = 'JM-07'
    JM_08 = 'JM-08'
    JM_09 = 'JM-09'
    JM_10 = 'JM-10'
    JM_11 = 'JM-11'
    JM_12 = 'JM-12'
    JM_13 = 'JM-13'
    JM_14 = 'JM-14'
    JO_AJ = 'JO-AJ'
    JO_AM = 'JO-AM'
    JO_AQ = 'JO-AQ'
    JO_AT = 'JO-AT'
    JO_AZ = 'JO-AZ'
    JO_BA = 'JO-BA'
    JO_IR = 'JO-IR'
    JO_JA = 'JO-JA'
    JO_KA = 'JO-KA'
    JO_MA = 'JO-MA'
    JO_MD = 'JO-MD'
    JO_MN = 'JO-MN'
    JP_01 = 'JP-01'
    JP_02 = 'JP-02'
    JP_03 = 'JP-03'
    JP_04 = 'JP-04'
    JP_05 = 'JP-05'
    JP_06 = 'JP-06'
    JP_07 = 'JP-07'
    JP_08 = 'JP-08'
    JP_09 = 'JP-09'
    JP_10 = 'JP-10'
    JP_11 = 'JP-11'
    JP_12 = 'JP-12'
    JP_13 = 'JP-13'
    JP_14 = 'JP-14'
    JP_15 = 'JP-15'
    JP_16 = 'JP-16'
    JP_17 = 'JP-17'
    JP_18 = 'JP-18'
    JP_19 = 'JP-19'
    JP_20 = 'JP-20'
    JP_21 = 'JP-21'
    JP_22 = 'JP-22'
    JP_23 = 'JP-23'
    JP_24 = 'JP-24'
    JP_25 = 'JP-25'
    JP_26 = 'JP-26'
    JP_27 = 'JP-27'
    JP_28 = 'JP-28'
    JP_29 = 'JP-29'
    JP_30 = 'JP-30'
    JP_31 = 'JP-31'
    JP_32 = 'JP-32'
    JP_33 = 'JP-33'
    JP_34 = 'JP-34'
    JP_35 = 'JP-35'
    JP_36 = 'JP-36'
    JP_37 = 'JP-37'
    JP_38 = 'JP-38'
    JP_39 = 'JP-39'
    JP_40 = 'JP-40'
    JP_41 = 'JP-41'
    JP_42 = 'JP-42'
    JP_43 = 'JP-43'
    JP_44 = 'JP-44'
    JP_45 = 'JP-45'
    JP_46 = 'JP-46'
    JP_47 = 'JP-47'
    KE_01 = 'KE-01'
    KE_02 = 'KE-02'
    KE_03 = 'KE-03'
    KE_04 = 'KE-04'
    KE_05 = 'KE-05'
    KE_06 = 'KE-06'
    KE_07 = 'KE-07'
    KE_08 = 'KE-08'
    KE_09 = 'KE-09'
    KE_10 = 'KE-10'
    KE_11 = 'KE-11'
    KE_12 = 'KE-12'
    KE_13 = 'KE-13'
    KE_14 = 'KE-14'
    KE_15 = 'KE-15'
    KE_16 = 'KE-16'
    KE_17 = 'KE-17'
    KE_18 = 'KE-18'
    KE_19 = 'KE-19'
    KE_20 = 'KE-20'
    KE_21 = 'KE-21'
    KE_22 = 'KE-22'
    KE_23 = 'KE-23'
    KE_24 = 'KE-24'
    KE_25 = 'KE-25'
    KE_26 = 'KE-26'
    KE_27 = 'KE-27'
    KE_28 = 'KE-28'
    KE_29 = 'KE-29'
    KE_30 = 'KE-30'
    KE_31 = 'KE-31'
    KE_32 = 'KE-32'
    KE_33 = 'KE-33'
    KE_34 = 'KE-34'
    KE_35 = 'KE-35'
    KE_36 = 'KE-36'
    KE_37 = 'KE-37'
    KE_38 = 'KE-38'
    KE_39 = 'KE-39'
    KE_40 = 'KE-40'
    KE_41 = 'KE-41'
    KE_42 = 'KE-42'
    KE_43 = 'KE-43'
    KE_44 = 'KE-44'
    KE_45 = 'KE-45'
    KE_46 = 'KE-46'
    KE_47 = 'KE-47'
    KG_B = 'KG-B'
    KG_C = 'KG-C'
    KG_GB = 'KG-GB'
    KG_GO = 'KG-GO'
    KG_J = 'KG-J'
    KG_N = 'KG-N'
    KG_O = 'KG-O'
    KG_T = 'KG-T'
    KG_Y = 'KG-Y'
    KH_1 = 'KH-1'
    KH_10 = 'KH-10'
    KH_11 = 'KH-11'
    KH_12 = 'KH-12'
    KH_13 = 'KH-13'
    KH_14 = 'KH-14'
    KH_15 = 'KH-15'
    KH_16 = 'KH-16'
    KH_17 = 'KH-17'
    KH_18 = 'KH-18'
    KH_19 = 'KH-19'
    KH_2 = 'KH-2'
    KH_20 = 'KH-20'
    KH_21 = 'KH-21'
    KH_22 = 'KH-22'
    KH_23 = 'KH-23'
    KH_24 = 'KH-24'
    KH_25 = 'KH-25'
    KH_3 = 'KH-3'
    KH_4 = 'KH-4'
    KH_5 = 'KH-5'
    KH_6 = 'KH-6'
    KH_7 = 'KH-7'
    KH_8 = 'KH-8'
    KH_9 = 'KH-9'
    KI_G = 'KI-G'
    KI_L = 'KI-L'
    KI_P = 'KI-P'
    KM_A = 'KM-A'
    KM_G = 'KM-G'
    KM_M = 'KM-M'
    KN_01 = 'KN-01'
    KN_02 = 'KN-02'
    KN_03 = 'KN-03'
    KN_04 = 'KN-04'
    KN_05 = 'KN-05'
    KN_06 = 'KN-06'
    KN_07 = 'KN-07'
    KN_08 = 'KN-08'
    KN_09 = 'KN-09'
    KN_10 = 'KN-10'
    KN_11 = 'KN-11'
    KN_12 = 'KN-12'
    KN_13 = 'KN-13'
    KN_15 = 'KN-15'
    KN_K = 'KN-K'
    KN_N = 'KN-N'
    KP_01 = 'KP-01'
    KP_02 = 'KP-02'
    KP_03 = 'KP-03'
    KP_04 = 'KP-04'
    KP_05 = 'KP-05'
    KP_06 = 'KP-06'
    KP_07 = 'KP-07'
    KP_08 = 'KP-08'
    KP_09 = 'KP-09'
    KP_10 = 'KP-10'
    KP_13 = 'KP-13'
    KP_14 = 'KP-14'
    KR_11 = 'KR-11'
    KR_26 = 'KR-26'
    KR_27 = 'KR-27'
    KR_28 = 'KR-28'
    KR_29 = 'KR-29'
    KR_30 = 'KR-30'
    KR_31 = 'KR-31'
    KR_41 = 'KR-41'
    KR_42 = 'KR-42'
    KR_43 = 'KR-43'
    KR_44 = 'KR-44'
    KR_45 = 'KR-45'
    KR_46 = 'KR-46'
    KR_47 = 'KR-47'
    KR_48 = 'KR-48'
    KR_49 = 'KR-49'
    KR_50 = 'KR-50'
    KW_AH = 'KW-AH'
    KW_FA = 'KW-FA'
    KW_HA = 'KW-HA'
    KW_JA = 'KW-JA'
    KW_KU = 'KW-KU'
    KW_MU = 'KW-MU'
    KZ_AKM = 'KZ-AKM'
    KZ_AKT = 'KZ-AKT'
    KZ_ALA = 'KZ-ALA'
    KZ_ALM = 'KZ-ALM'
    KZ_AST = 'KZ-AST'
    KZ_ATY = 'KZ-ATY'
    KZ_KAR = 'KZ-KAR'
    KZ_KUS = 'KZ-KUS'
    KZ_KZY = 'KZ-KZY'
    KZ_MAN = 'KZ-MAN'
    KZ_PAV = 'KZ-PAV'
    KZ_SEV = 'KZ-SEV'
    KZ_SHY = 'KZ-SHY'
    KZ_VOS = 'KZ-VOS'
    KZ_YUZ = 'KZ-YUZ'
    KZ_ZAP = 'KZ-ZAP'
    KZ_ZHA = 'KZ-ZHA'
    LA_AT = 'LA-AT'
    LA_BK = 'LA-BK'
    LA_BL = 'LA-BL'
    LA_CH = 'LA-CH'
    LA_HO = 'LA-HO'
    LA_KH = 'LA-KH'
    LA_LM = 'LA-LM'
    LA_LP = 'LA-LP'
    LA_OU = 'LA-OU'
    LA_PH = 'LA-PH'
    LA_SL = 'LA-SL'
    LA_SV = 'LA-SV'
    LA_VI = 'LA-VI'
    LA_VT = 'LA-VT'
    LA_XA = 'LA-XA'
    LA_XE = 'LA-XE'
    LA_XI = 'LA-XI'
    LA_XS = 'LA-XS'
    LB_AK = 'LB-AK'
    LB_AS = 'LB-AS'
    LB_BA = 'LB-BA'
    LB_BH = 'LB-BH'
    LB_BI = 'LB-BI'
    LB_JA = 'LB-JA'
    LB_JL = 'LB-JL'
    LB_NA = 'LB-NA'
    LC_01 = 'LC-01'
    LC_02 = 'LC-02'
    LC_03 = 'LC-03'
    LC_05 = 'LC-05'
    LC_06 = 'LC-06'
    LC_07 = 'LC-07'
    LC_08 = 'LC-08'
    LC_10 = 'LC-10'
    LC_11 = 'LC-11'
    LC_12 = 'LC-12'
    LI_01 = 'LI-01'
    LI_02 = 'LI-02'
    LI_03 = 'LI-03'
    LI_04 = 'LI-04'
    LI_05 = 'LI-05'
    LI_06 = 'LI-06'
    LI_07 = 'LI-07'
    LI_08 = 'LI-08'
    LI_09 = 'LI-09'
    LI_10 = 'LI-10'
    LI_11 = 'LI-11'
    LK_1 = 'LK-1'
    LK_11 = 'LK-11'
    LK_12 = 'LK-12'
    LK_13 = 'LK-13'
    LK_2 = 'LK-2'
    LK_21 = 'LK-21'
    LK_22 = 'LK-22'
    LK_23 = 'LK-23'
    LK_3 = 'LK-3'
    LK_31 = 'LK-31'
    LK_32 = 'LK-32'
    LK_33 = 'LK-33'
    LK_4 = 'LK-4'
    LK_41 = 'LK-41'
    LK_42 = 'LK-42'
    LK_43 = 'LK-43'
    LK_44 = 'LK-44'
    LK_45 = 'LK-45'
    LK_5 = 'LK-5'
    LK_51 = 'LK-51'
    LK_52 = 'LK-52'
    LK_53 = 'LK-53'
    LK_6 = 'LK-6'
    LK_61 = 'LK-61'
    LK_62 = 'LK-62'
    LK_7 = 'LK-7'
    LK_71 = 'LK-71'
    LK_72 = 'LK-72'
    LK_8 = 'LK-8'
    LK_81 = 'LK-81'
    LK_82 = 'LK-82'
    LK_9 = 'LK-9'
    LK_91 = 'LK-91'
    LK_92 = 'LK-92'
    LR_BG = 'LR-BG'
    LR_BM = 'LR-BM'
    LR_CM = 'LR-CM'
    LR_GB = 'LR-GB'
    LR_GG = 'LR-GG'
    LR_GK = 'LR-GK'
    LR_GP = 'LR-GP'
    LR_LO = 'LR-LO'
    LR_MG = 'LR-MG'
    LR_MO = 'LR-MO'
    LR_MY = 'LR-MY'
    LR_NI = 'LR-NI'
    LR_RG = 'LR-RG'
    LR_RI = 'LR-RI'
    LR_SI = 'LR-SI'
    LS_A = 'LS-A'
    LS_B = 'LS-B'
    LS_C = 'LS-C'
    LS_D = 'LS-D'
    LS_E = 'LS-E'
    LS_F = 'LS-F'
    LS_G = 'LS-G'
    LS_H = 'LS-H'
    LS_J = 'LS-J'
    LS_K = 'LS-K'
    LT_01 = 'LT-01'
    LT_02 = 'LT-02'
    LT_03 = 'LT-03'
    LT_04 = 'LT-04'
    LT_05 = 'LT-05'
    LT_06 = 'LT-06'
    LT_07 = 'LT-07'
    LT_08 = 'LT-08'
    LT_09 = 'LT-09'
    LT_10 = 'LT-10'
    LT_11 = 'LT-11'
    LT_12 = 'LT-12'
    LT_13 = 'LT-13'
    LT_14 = 'LT-14'
    LT_15 = 'LT-15'
    LT_16 = 'LT-16'
    LT_17 = 'LT-17'
    LT_18 = 'LT-18'
    LT_19 = 'LT-19'
    LT_20 = 'LT-20'
    LT_21 = 'LT-21'
    LT_22 = 'LT-22'
    LT_23 = 'LT-23'
    LT_24 = 'LT-24'
    LT_25 = 'LT-25'
    LT_26 = 'LT-26'
    LT_27 = 'LT-27'
    LT_28 = 'LT-28'
    LT_29 = 'LT-29'
    LT_30 = 'LT-30'
    LT_31 = 'LT-31'
    LT_32 = 'LT-32'
    LT_33 = 'LT-33'
    LT_34 = 'LT-34'
    LT_35 = 'LT-35'
    LT_36 = 'LT-36'
    LT_37 = 'LT-37'
    LT_38 = 'LT-38'
    LT_39 = 'LT-39'
    LT_40 = 'LT-40'
    LT_41 = 'LT-41'
    LT_42 = 'LT-42'
    LT_43 = 'LT-43'
    LT_44 = 'LT-44'
    LT_45 = 'LT-45'
    LT_46 = 'LT-46'
    LT_47 = 'LT-47'
    LT_48 = 'LT-48'
    LT_49 = 'LT-49'
    LT_50 = 'LT-50'
    LT_51 = 'LT-51'
    LT_52 = 'LT-52'
    LT_53 = 'LT-53'
    LT_54 = 'LT-54'
    LT_55 = 'LT-55'
    LT_56 = 'LT-56'
    LT_57 = 'LT-57'
    LT_58 = 'LT-58'
    LT_59 = 'LT-59'
    LT_60 = 'LT-60'
    LT_AL = 'LT-AL'
    LT_KL = 'LT-KL'
    LT_KU = 'LT-KU'
    LT_MR = 'LT-MR'
    LT_PN = 'LT-PN'
    LT_SA = 'LT-SA'
    LT_TA = 'LT-TA'
    LT_TE = 'LT-TE'
    LT_UT = 'LT-UT'
    LT_VL = 'LT-VL'
    LU_CA = 'LU-CA'
    LU_CL = 'LU-CL'
    LU_DI = 'LU-DI'
    LU_EC = 'LU-EC'
    LU_ES = 'LU-ES'
    LU_GR = 'LU-GR'
    LU_LU = 'LU-LU'
    LU_ME = 'LU-ME'
    LU_RD = 'LU-RD'
    LU_RM = 'LU-RM'
    LU_VD = 'LU-VD'
    LU_WI = 'LU-WI'
    LV_001 = 'LV-001'
    LV_002 = 'LV-002'
    LV_003 = 'LV-003'
    LV_004 = 'LV-004'
    LV_005 = 'LV-005'
    LV_006 = 'LV-006'
    LV_007 = 'LV-007'
    LV_008 = 'LV-008'
    LV_009 = 'LV-009'
    LV_010 = 'LV-010'
    LV_011 = 'LV-011'
    LV_012 = 'LV-012'
    LV_013 = 'LV-013'
    LV_014 = 'LV-014'
    LV_015 = 'LV-015'
    LV_016 = 'LV-016'
    LV_017 = 'LV-017'
    LV_018 = 'LV-018'
    LV_019 = 'LV-019'
    LV_020 = 'LV-020'
    LV_021 = 'LV-021'
    LV_022 = 'LV-022'
    LV_023 = 'LV-023'
    LV_024 = 'LV-024'
    LV_025 = 'LV-025'
    LV_026 = 'LV-026'
    LV_027 = 'LV-027'
    LV_028 = 'LV-028'
    LV_029 = 'LV-029'
    LV_030 = 'LV-030'
    LV_031 = 'LV-031'
    LV_032 = 'LV-032'
    LV_033 = 'LV-033'
    LV_034 = 'LV-034'
    LV_035 = 'LV-035'
    LV_036 = 'LV-036'
    LV_037 = 'LV-037'
    LV_038 = 'LV-038'
    LV_039 = 'LV-039'
    LV_040 = 'LV-040'
    LV_041 = 'LV-041'
    LV_042 = 'LV-042'
    LV_043 = 'LV-043'
    LV_044 = 'LV-044'
    LV_045 = 'LV-045'
    LV_046 = 'LV-046'
    LV_047 = 'LV-047'
    LV_048 = 'LV-048'
    LV_049 = 'LV-049'
    LV_050 = 'LV-050'
    LV_051 = 'LV-051'
    LV_052 = 'LV-052'
    LV_053 = 'LV-053'
    LV_054 = 'LV-054'
    LV_055 = 'LV-055'
    LV_056 = 'LV-056'
    LV_057 = 'LV-057'
    LV_058 = 'LV-058'
    LV_059 = 'LV-059'
    LV_060 = 'LV-060'
    LV_061 = 'LV-061'
    LV_062 = 'LV-062'
    LV_063 = 'LV-063'
    LV_064 = 'LV-064'
    LV_065 = 'LV-065'
    LV_066 = 'LV-066'
    LV_067 = 'LV-067'
    LV_068 = 'LV-068'
    LV_069 = 'LV-069'
    LV_070 = 'LV-070'
    LV_071 = 'LV-071'
    LV_072 = 'LV-072'
    LV_073 = 'LV-073'
    LV_074 = 'LV-074'
    LV_075 = 'LV-075'
    LV_076 = 'LV-076'
    LV_077 = 'LV-077'
    LV_078 = 'LV-078'
    LV_079 = 'LV-079'
    LV_080 = 'LV-080'
    LV_081 = 'LV-081'
    LV_082 = 'LV-082'
    LV_083 = 'LV-083'
    LV_084 = 'LV-084'
    LV_085 = 'LV-085'
    LV_086 = 'LV-086'
    LV_087 = 'LV-087'
    LV_088 = 'LV-088'
    LV_089 = 'LV-089'
    LV_090 = 'LV-090'
    LV_091 = 'LV-091'
    LV_092 = 'LV-092'
    LV_093 = 'LV-093'
    LV_094 = 'LV-094'
    LV_095 = 'LV-095'
    LV_096 = 'LV-096'
    LV_097 = 'LV-097'
    LV_098 = 'LV-098'
    LV_099 = 'LV-099'
    LV_100 = 'LV-100'
    LV_101 = 'LV-101'
    LV_102 = 'LV-102'
    LV_103 = 'LV-103'
    LV_104 = 'LV-104'
    LV_105 = 'LV-105'
    LV_106 = 'LV-106'
    LV_107 = 'LV-107'
    LV_108 = 'LV-108'
    LV_109 = 'LV-109'
    LV_110 = 'LV-110'
    LV_DGV = 'LV-DGV'
    LV_JEL = 'LV-JEL'
    LV_JKB = 'LV-JKB'
    LV_JUR = 'LV-JUR'
    LV_LPX = 'LV-LPX'
    LV_REZ = 'LV-REZ'
    LV_RIX = 'LV-RIX'
    LV_VEN = 'LV-VEN'
    LV_VMR = 'LV-VMR'
    LY_BA = 'LY-BA'
    LY_BU = 'LY-BU'
    LY_DR = 'LY-DR'
    LY_GT = 'LY-GT'
    LY_JA = 'LY-JA'
    LY_JG = 'LY-JG'
    LY_JI = 'LY-JI'
    LY_JU = 'LY-JU'
    LY_KF = 'LY-KF'
    LY_MB = 'LY-MB'
    LY_MI = 'LY-MI'
    LY_MJ = 'LY-MJ'
    LY_MQ = 'LY-MQ'
    LY_NL = 'LY-NL'
    LY_NQ = 'LY-NQ'
    LY_SB = 'LY-SB'
    LY_SR = 'LY-SR'
    LY_TB = 'LY-TB'
    LY_WA = 'LY-WA'
    LY_WD = 'LY-WD'
    LY_WS = 'LY-WS'
    LY_ZA = 'LY-ZA'
    MA_01 = 'MA-01'
    MA_02 = 'MA-02'
    MA_03 = 'MA-03'
    MA_04 = 'MA-04'
    MA_05 = 'MA-05'
    MA_06 = 'MA-06'
    MA_07 = 'MA-07'
    MA_08 = 'MA-08'
    MA_09 = 'MA-09'
    MA_10 = 'MA-10'
    MA_11 = 'MA-11'
    MA_12 = 'MA-12'
    MA_AGD = 'MA-AGD'
    MA_AOU = 'MA-AOU'
    MA_ASZ = 'MA-ASZ'
    MA_AZI = 'MA-AZI'
    MA_BEM = 'MA-BEM'
    MA_BER = 'MA-BER'
    MA_BES = 'MA-BES'
    MA_BOD = 'MA-BOD'
    MA_BOM = 'MA-BOM'
    MA_BRR = 'MA-BRR'
    MA_CAS = 'MA-CAS'
    MA_CHE = 'MA-CHE'
    MA_CHI = 'MA-CHI'
    MA_CHT = 'MA-CHT'
    MA_DRI = 'MA-DRI'
    MA_ERR = 'MA-ERR'
    MA_ESI = 'MA-ESI'
    MA_ESM = 'MA-ESM'
    MA_FAH = 'MA-FAH'
    MA_FES = 'MA-FES'
    MA_FIG = 'MA-FIG'
    MA_FQH = 'MA-FQH'
    MA_GUE = 'MA-GUE'
    MA_GUF = 'MA-GUF'
    MA_HAJ = 'MA-HAJ'
    MA_HAO = 'MA-HAO'
    MA_HOC = 'MA-HOC'
    MA_IFR = 'MA-IFR'
    MA_INE = 'MA-INE'
    MA_JDI = 'MA-JDI'
    MA_JRA = 'MA-JRA'
    MA_KEN = 'MA-KEN'
    MA_KES = 'MA-KES'
    MA_KHE = 'MA-KHE'
    MA_KHN = 'MA-KHN'
    MA_KHO = 'MA-KHO'
    MA_LAA = 'MA-LAA'
    MA_LAR = 'MA-LAR'
    MA_MAR = 'MA-MAR'
    MA_MDF = 'MA-MDF'
    MA_MED = 'MA-MED'
    MA_MEK = 'MA-MEK'
    MA_MID = 'MA-MID'
    MA_MOH = 'MA-MOH'
    MA_MOU = 'MA-MOU'
    MA_NAD = 'MA-NAD'
    MA_NOU = 'MA-NOU'
    MA_OUA = 'MA-OUA'
    MA_OUD = 'MA-OUD'
    MA_OUJ = 'MA-OUJ'
    MA_OUZ = 'MA-OUZ'
    MA_RAB = 'MA-RAB'
    MA_REH = 'MA-REH'
    MA_SAF = 'MA-SAF'
    MA_SAL = 'MA-SAL'
    MA_SEF = 'MA-SEF'
    MA_SET = 'MA-SET'
    MA_SIB = 'MA-SIB'
    MA_SIF = 'MA-SIF'
    MA_SIK = 'MA-SIK'
    MA_SIL = 'MA-SIL'
    MA_SKH = 'MA-SKH'
    MA_TAF = 'MA-TAF'
    MA_TAI = 'MA-TAI'
    MA_TAO = 'MA-TAO'
    MA_TAR = 'MA-TAR'
    MA_TAT = 'MA-TAT'
    MA_TAZ = 'MA-TAZ'
    MA_TET = 'MA-TET'
    MA_TIN = 'MA-TIN'
    MA_TIZ = 'MA-TIZ'
    MA_TNG = 'MA-TNG'
    MA_TNT = 'MA-TNT'
    MA_YUS = 'MA-YUS'
    MA_ZAG = 'MA-ZAG'
    MC_CL = 'MC-CL'
    MC_CO = 'MC-CO'
    MC_FO = 'MC-FO'
    MC_GA = 'MC-GA'
    MC_JE = 'MC-JE'
    MC_LA = 'MC-LA'
    MC_MA = 'MC-MA'
    MC_MC = 'MC-MC'
    MC_MG = 'MC-MG'
    MC_MO = 'MC-MO'
    MC_MU = 'MC-MU'
    MC_PH = 'MC-PH'
    MC_SD = 'MC-SD'
    MC_SO = 'MC-SO'
    MC_SP = 'MC-SP'
    MC_SR = 'MC-SR'
    MC_VR = 'MC-VR'
    MD_AN = 'MD-AN'
    MD_BA = 'MD-BA'
    MD_BD = 'MD-BD'
    MD_BR = 'MD-BR'
    MD_BS = 'MD-BS'
    MD_CA = 'MD-CA'
    MD_CL = 'MD-CL'
    MD_CM = 'MD-CM'
    MD_CR = 'MD-CR'
    MD_CS = 'MD-CS'
    MD_CT = 'MD-CT'
    MD_CU = 'MD-CU'
    MD_DO = 'MD-DO'
    MD_DR = 'MD-DR'
    MD_DU = 'MD-DU'
    MD_ED = 'MD-ED'
    MD_FA = 'MD-FA'
    MD_FL = 'MD-FL'
    MD_GA = 'MD-GA'
    MD_GL = 'MD-GL'
    MD_HI = 'MD-HI'
    MD_IA = 'MD-IA'
    MD_LE = 'MD-LE'
    MD_NI = 'MD-NI'
    MD_OC = 'MD-OC'
    MD_OR = 'MD-OR'
    MD_RE = 'MD-RE'
    MD_RI = 'MD-RI'
    MD_SD = 'MD-SD'
    MD_SI = 'MD-SI'
    MD_SN = 'MD-SN'
    MD_SO = 'MD-SO'
    MD_ST = 'MD-ST'
    MD_SV = 'MD-SV'
    MD_TA = 'MD-TA'
    MD_TE = 'MD-TE'
    MD_UN = 'MD-UN'
    ME_01 = 'ME-01'
    ME_02 = 'ME-02'
    ME_03 = 'ME-03'
    ME_04 = 'ME-04'
    ME_05 = 'ME-05'
    ME_06 = 'ME-06'
    ME_07 = 'ME-07'
    ME_08 = 'ME-08'
    ME_09 = 'ME-09'
    ME_10 = 'ME-10'
    ME_11 = 'ME-11'
    ME_12 = 'ME-12'
    ME_13 = 'ME-13'
    ME_14 = 'ME-14'
    ME_15 = 'ME-15'
    ME_16 = 'ME-16'
    ME_17 = 'ME-17'
    ME_18 = 'ME-18'
    ME_19 = 'ME-19'
    ME_20 = 'ME-20'
    ME_21 = 'ME-21'
    ME_22 = 'ME-22'
    ME_23 = 'ME-23'
    ME_24 = 'ME-24'
    MG_A = 'MG-A'
    MG_D = 'MG-D'
    MG_F = 'MG-F'
    MG_M = 'MG-M'
    MG_T = 'MG-T'
    MG_U = 'MG-U'
    MH_ALK = 'MH-ALK'
    MH_ALL = 'MH-ALL'
    MH_ARN = 'MH-ARN'
    MH_AUR = 'MH-AUR'
    MH_EBO = 'MH-EBO'
    MH_ENI = 'MH-ENI'
    MH_JAB = 'MH-JAB'
    MH_JAL = 'MH-JAL'
    MH_KIL = 'MH-KIL'
    MH_KWA = 'MH-KWA'
    MH_L = 'MH-L'
    MH_LAE = 'MH-LAE'
    MH_LIB = 'MH-LIB'
    MH_LIK = 'MH-LIK'
    MH_MAJ = 'MH-MAJ'
    MH_MAL = 'MH-MAL'
    MH_MEJ = 'MH-MEJ'
    MH_MIL = 'MH-MIL'
    MH_NMK = 'MH-NMK'
    MH_NMU = 'MH-NMU'
    MH_RON = 'MH-RON'
    MH_T = 'MH-T'
    MH_UJA = 'MH-UJA'
    MH_UTI = 'MH-UTI'
    MH_WTH = 'MH-WTH'
    MH_WTJ = 'MH-WTJ'
    MK_101 = 'MK-101'
    MK_102 = 'MK-102'
    MK_103 = 'MK-103'
    MK_104 = 'MK-104'
    MK_105 = 'MK-105'
    MK_106 = 'MK-106'
    MK_107 = 'MK-107'
    MK_108 = 'MK-108'
    MK_109 = 'MK-109'
    MK_201 = 'MK-201'
    MK_202 = 'MK-202'
    MK_203 = 'MK-203'
    MK_204 = 'MK-204'
    MK_205 = 'MK-205'
    MK_206 = 'MK-206'
    MK_207 = 'MK-207'
    MK_208 = 'MK-208'
    MK_209 = 'MK-209'
    MK_210 = 'MK-210'
    MK_211 = 'MK-211'
    MK_301 = 'MK-301'
    MK_303 = 'MK-303'
    MK_304 = 'MK-304'
    MK_307 = 'MK-307'
    MK_308 = 'MK-308'
    MK_310 = 'MK-310'
    MK_311 = 'MK-311'
    MK_312 = 'MK-312'
    MK_313 = 'MK-313'
    MK_401 = 'MK-401'
    MK_402 = 'MK-402'
    MK_403 = 'MK-403'
    MK_404 = 'MK-404'
    MK_405 = 'MK-405'
    MK_406 = 'MK-406'
    MK_407 = 'MK-407'
    MK_408 = 'MK-408'
    MK_409 = 'MK-409'
    MK_410 = 'MK-410'
    MK_501 = 'MK-501'
    MK_502 = 'MK-502'
    MK_503 = 'MK-503'
    MK_504 = 'MK-504'
    MK_505 = 'MK-505'
    MK_506 = 'MK-506'
    MK_507 = 'MK-507'
    MK_508 = 'MK-508'
    MK_509 = 'MK-509'
    MK_601 = 'MK-601'
    MK_602 = 'MK-602'
    MK_603 = 'MK-603'
    MK_604 = 'MK-604'
    MK_605 = 'MK-605'
    MK_606 = 'MK-606'
    MK_607 = 'MK-607'
    MK_608 = 'MK-608'
    MK_609 = 'MK-609'
    MK_701 = 'MK-701'
    MK_702 = 'MK-702'
    MK_703 = 'MK-703'
    MK_704 = 'MK-704'
    MK_705 = 'MK-705'
    MK_706 = 'MK-706'
    MK_801 = 'MK-801'
    MK_802 = 'MK-802'
    MK_803 = 'MK-803'
    MK_804 = 'MK-804'
    MK_805 = 'MK-805'
    MK_806 = 'MK-806'
    MK_807 = 'MK-807'
    MK_808 = 'MK-808'
    MK_809 = 'MK-809'
    MK_810 = 'MK-810'
    MK_811 = 'MK-811'
    MK_812 = 'MK-812'
    MK_813 = 'MK-813'
    MK_814 = 'MK-814'
    MK_815 = 'MK-815'
    MK_816 = 'MK-816'
    MK_817 = 'MK-817'
    ML_1 = 'ML-1'
    ML_10 = 'ML-10'
    ML_2 = 'ML-2'
    ML_3 = 'ML-3'
    ML_4 = 'ML-4'
    ML_5 = 'ML-5'
    ML_6 = 'ML-6'
    ML_7 = 'ML-7'
    ML_8 = 'ML-8'
    ML_9 = 'ML-9'
    ML_BKO = 'ML-BKO'
    MM_01 = 'MM-01'
    MM_02 = 'MM-02'
    MM_03 = 'MM-03'
    MM_04 = 'MM-04'
    MM_05 = 'MM-05'
    MM_06 = 'MM-06'
    MM_07 = 'MM-07'
    MM_11 = 'MM-11'
    MM_12 = 'MM-12'
    MM_13 = 'MM-13'
    MM_14 = 'MM-14'
    MM_15 = 'MM-15'
    MM_16 = 'MM-16'
    MM_17 = 'MM-17'
    MM_18 = 'MM-18'
    MN_035 = 'MN-035'
    MN_037 = 'MN-037'
    MN_039 = 'MN-039'
    MN_041 = 'MN-041'
    MN_043 = 'MN-043'
    MN_046 = 'MN-046'
    MN_047 = 'MN-047'
    MN_049 = 'MN-049'
    MN_051 = 'MN-051'
    MN_053 = 'MN-053'
    MN_055 = 'MN-055'
    MN_057 = 'MN-057'
    MN_059 = 'MN-059'
    MN_061 = 'MN-061'
    MN_063 = 'MN-063'
    MN_064 = 'MN-064'
    MN_065 = 'MN-065'
    MN_067 = 'MN-067'
    MN_069 = 'MN-069'
    MN_071 = 'MN-071'
    MN_073 = 'MN-073'
    MN_1 = 'MN-1'
    MR_01 = 'MR-01'
    MR_02 = 'MR-02'
    MR_03 = 'MR-03'
    MR_04 = 'MR-04'
    MR_05 = 'MR-05'
    MR_06 = 'MR-06'
    MR_07 = 'MR-07'
    MR_08 = 'MR-08'
    MR_09 = 'MR-09'
    MR_10 = 'MR-10'
    MR_11 = 'MR-11'
    MR_12 = 'MR-12'
    MR_13 = 'MR-13'
    MR_14 = 'MR-14'
    MR_15 = 'MR-15'
    MT_01 = 'MT-01'
    MT_02 = 'MT-02'
    MT_03 = 'MT-03'
    MT_04 = 'MT-04'
    MT_05 = 'MT-05'
    MT_06 = 'MT-06'
    MT_07 = 'MT-07'
    MT_08 = 'MT-08'
    MT_09 = 'MT-09'
    MT_10 = 'MT-10'
    MT_11 = 'MT-11'
    MT_12 = 'MT-12'
    MT_13 = 'MT-13'
    MT_14 = 'MT-14'
    MT_15 = 'MT-15'
    MT_16 = 'MT-16'
    MT_17 = 'MT-17'
    MT_18 = 'MT-18'
    MT_19 = 'MT-19'
    MT_20 = 'MT-20'
    MT_21 = 'MT-21'
    MT_22 = 'MT-22'
    MT_23 = 'MT-23'
    MT_24 = 'MT-24'
    MT_25 = 'MT-25'
    MT_26 = 'MT-26'
    MT_27 = 'MT-27'
    MT_28 = 'MT-28'
    MT_29 = 'MT-29'
    MT_30 = 'MT-30'
    MT_31 = 'MT-31'
    MT_32 = 'MT-32'
    MT_33 = 'MT-33'
    MT_34 = 'MT-34'
    MT_35 = 'MT-35'
    MT_36 = 'MT-36'
    MT_37 = 'MT-37'
    MT_38 = 'MT-38'
    MT_39 = 'MT-39'
    MT_40 = 'MT-40'
    MT_41 = 'MT-41'
    MT_42 = 'MT-42'
    MT_43 = 'MT-43'
    MT_44 = 'MT-44'
    MT_45 = 'MT-45'
    MT_46 = 'MT-46'
    MT_47 = 'MT-47'
    MT_48 = 'MT-48'
    MT_49 = 'MT-49'
    MT_50 = 'MT-50'
    MT_51 = 'MT-51'
    MT_52 = 'MT-52'
    MT_53 = 'MT-53'
    MT_54 = 'MT-54'
    MT_55 = 'MT-55'
    MT_56 = 'MT-56'
    MT_57 = 'MT-57'
    MT_58 = 'MT-58'
    MT_59 = 'MT-59'
    MT_60 = 'MT-60'
    MT_61 = 'MT-61'
    MT_62 = 'MT-62'
    MT_63 = 'MT-63'
    MT_64 = 'MT-64'
    MT_65 = 'MT-65'
    MT_66 = 'MT-66'
    MT_67 = 'MT-67'
    MT_68 = 'MT-68'
    MU_AG = 'MU-AG'
    MU_BL = 'MU-BL'
    MU_CC = 'MU-CC'
    MU_FL = 'MU-FL'
    MU_GP = 'MU-GP'
    MU_MO = 'MU-MO'
    MU_PA = 'MU-PA'
    MU_PL = 'MU-PL'
    MU_PW = 'MU-PW'
    MU_RO = 'MU-RO'
    MU_RR = 'MU-RR'
    MU_SA = 'MU-SA'
    MV_00 = 'MV-00'
    MV_01 = 'MV-01'
    MV_02 = 'MV-02'
    MV_03 = 'MV-03'
    MV_04 = 'MV-04'
    MV_05 = 'MV-05'
    MV_07 = 'MV-07'
    MV_08 = 'MV-08'
    MV_12 = 'MV-12'
    MV_13 = 'MV-13'
    MV_14 = 'MV-14'
    MV_17 = 'MV-17'
    MV_20 = 'MV-20'
    MV_23 = 'MV-23'
    MV_24 = 'MV-24'
    MV_25 = 'MV-25'
    MV_26 = 'MV-26'
    MV_27 = 'MV-27'
    MV_28 = 'MV-28'
    MV_29 = 'MV-29'
    MV_MLE = 'MV-MLE'
    MW_BA = 'MW-BA'
    MW_BL = 'MW-BL'
    MW_C = 'MW-C'
    MW_CK = 'MW-CK'
    MW_CR = 'MW-CR'
    MW_CT = 'MW-CT'
    MW_DE = 'MW-DE'
    MW_DO = 'MW-DO'
    MW_KR = 'MW-KR'
    MW_KS = 'MW-KS'
    MW_LI = 'MW-LI'
    MW_LK = 'MW-LK'
    MW_MC = 'MW-MC'
    MW_MG = 'MW-MG'
    MW_MH = 'MW-MH'
    MW_MU = 'MW-MU'
    MW_MW = 'MW-MW'
    MW_MZ = 'MW-MZ'
    MW_N = 'MW-N'
    MW_NB = 'MW-NB'
    MW_NE = 'MW-NE'
    MW_NI = 'MW-NI'
    MW_NK = 'MW-NK'
    MW_NS = 'MW-NS'
    MW_NU = 'MW-NU'
    MW_PH = 'MW-PH'
    MW_RU = 'MW-RU'
    MW_S = 'MW-S'
    MW_SA = 'MW-SA'
    MW_TH = 'MW-TH'
    MW_ZO = 'MW-ZO'
    MX_AGU = 'MX-AGU'
    MX_BCN = 'MX-BCN'
    MX_BCS = 'MX-BCS'
    MX_CAM = 'MX-CAM'
    MX_CHH = 'MX-CHH'
    MX_CHP = 'MX-CHP'
    MX_CMX = 'MX-CMX'
    MX_COA = 'MX-COA'
    MX_COL = 'MX-COL'
    MX_DUR = 'MX-DUR'
    MX_GRO = 'MX-GRO'
    MX_GUA = 'MX-GUA'
    MX_HID = 'MX-HID'
    MX_JAL = 'MX-JAL'
    MX_MEX = 'MX-MEX'
    MX_MIC = 'MX-MIC'
    MX_MOR = 'MX-MOR'
    MX_NAY = 'MX-NAY'
    MX_NLE = 'MX-NLE'
    MX_OAX = 'MX-OAX'
    MX_PUE = 'MX-PUE'
    MX_QUE = 'MX-QUE'
    MX_ROO = 'MX-ROO'
    MX_SIN = 'MX-SIN'
    MX_SLP = 'MX-SLP'
    MX_SON = 'MX-SON'
    MX_TAB = 'MX-TAB'
    MX_TAM = 'MX-TAM'
    MX_TLA = 'MX-TLA'
    MX_VER = 'MX-VER'
    MX_YUC = 'MX-YUC'
    MX_ZAC = 'MX-ZAC'
    MY_01 = 'MY-01'
    MY_02 = 'MY-02'
    MY_03 = 'MY-03'
    MY_04 = 'MY-04'
    MY_05 = 'MY-05'
    MY_06 = 'MY-06'
    MY_07 = 'MY-07'
    MY_08 = 'MY-08'
    MY_09 = 'MY-09'
    MY_10 = 'MY-10'
    MY_11 = 'MY-11'
    MY_12 = 'MY-12'
    MY_13 = 'MY-13'
    MY_14 = 'MY-14'
    MY_15 = 'MY-15'
    MY_16 = 'MY-16'
    MZ_A = 'MZ-A'
    MZ_B = 'MZ-B'
    MZ_G = 'MZ-G'
    MZ_I = 'MZ-I'
    MZ_L = 'MZ-L'
    MZ_MPM = 'MZ-MPM'
    MZ_N = 'MZ-N'
    MZ_P = 'MZ-P'
    MZ_Q = 'MZ-Q'
    MZ_S = 'MZ-S'
    MZ_T = 'MZ-T'
    NA_CA = 'NA-CA'
    NA_ER = 'NA-ER'
    NA_HA = 'NA-HA'
    NA_KA = 'NA-KA'
    NA_KE = 'NA-KE'
    NA_KH = 'NA-KH'
    NA_KU = 'NA-KU'
    NA_KW = 'NA-KW'
    NA_OD = 'NA-OD'
    NA_OH = 'NA-OH'
    NA_ON = 'NA-ON'
    NA_OS = 'NA-OS'
    NA_OT = 'NA-OT'
    NA_OW = 'NA-OW'
    NE_1 = 'NE-1'
    NE_2 = 'NE-2'
    NE_3 = 'NE-3'
    NE_4 = 'NE-4'
    NE_5 = 'NE-5'
    NE_6 = 'NE-6'
    NE_7 = 'NE-7'
    NE_8 = 'NE-8'
    NG_AB = 'NG-AB'
    NG_AD = 'NG-AD'
    NG_AK = 'NG-AK'
    NG_AN = 'NG-AN'
    NG_BA = 'NG-BA'
    NG_BE = 'NG-BE'
    NG_BO = 'NG-BO'
    NG_BY = 'NG-BY'
    NG_CR = 'NG-CR'
    NG_DE = 'NG-DE'
    NG_EB = 'NG-EB'
    NG_ED = 'NG-ED'
    NG_EK = 'NG-EK'
    NG_EN = 'NG-EN'
    NG_FC = 'NG-FC'
    NG_GO = 'NG-GO'
    NG_IM = 'NG-IM'
    NG_JI = 'NG-JI'
    NG_KD = 'NG-KD'
    NG_KE = 'NG-KE'
    NG_KN = 'NG-KN'
    NG_KO = 'NG-KO'
    NG_KT = 'NG-KT'
    NG_KW = 'NG-KW'
    NG_LA = 'NG-LA'
    NG_NA = 'NG-NA'
    NG_NI = 'NG-NI'
    NG_OG = 'NG-OG'
    NG_ON = 'NG-ON'
    NG_OS = 'NG-OS'
    NG_OY = 'NG-OY'
    NG_PL = 'NG-PL'
    NG_RI = 'NG-RI'
    NG_SO = 'NG-SO'
    NG_TA = 'NG-TA'
    NG_YO = 'NG-YO'
    NG_ZA = 'NG-ZA'
    NI_AN = 'NI-AN'
    NI_AS = 'NI-AS'
    NI_BO = 'NI-BO'
    NI_CA = 'NI-CA'
    NI_CI = 'NI-CI'
    NI_CO = 'NI-CO'
    NI_ES = 'NI-ES'
    NI_GR = 'NI-GR'
    NI_JI = 'NI-JI'
    NI_LE = 'NI-LE'
    NI_MD = 'NI-MD'
    NI_MN = 'NI-MN'
    NI_MS = 'NI-MS'
    NI_MT = 'NI-MT'
    NI_NS = 'NI-NS'
    NI_RI = 'NI-RI'
    NI_SJ = 'NI-SJ'
    NL_AW = 'NL-AW'
    NL_BQ1 = 'NL-BQ1'
    NL_BQ2 = 'NL-BQ2'
    NL_BQ3 = 'NL-BQ3'
    NL_CW = 'NL-CW'
    NL_DR = 'NL-DR'
    NL_FL = 'NL-FL'
    NL_FR = 'NL-FR'
    NL_GE = 'NL-GE'
    NL_GR = 'NL-GR'
    NL_LI = 'NL-LI'
    NL_NB = 'NL-NB'
    NL_NH = 'NL-NH'
    NL_OV = 'NL-OV'
    NL_SX = 'NL-SX'
    NL_UT = 'NL-UT'
    NL_ZE = 'NL-ZE'
    NL_ZH = 'NL-ZH'
    NO_03 = 'NO-03'
    NO_11 = 'NO-11'
    NO_15 = 'NO-15'
    NO_18 = 'NO-18'
    NO_21 = 'NO-21'
    NO_22 = 'NO-22'
    NO_30 = 'NO-30'
    NO_34 = 'NO-34'
    NO_38 = 'NO-38'
    NO_42 = 'NO-42'
    NO_46 = 'NO-46'
    NO_50 = 'NO-50'
    NO_54 = 'NO-54'
    NP_1 = 'NP-1'
    NP_2 = 'NP-2'
    NP_3 = 'NP-3'
    NP_4 = 'NP-4'
    NP_5 = 'NP-5'
    NP_BA = 'NP-BA'
    NP_BH = 'NP-BH'
    NP_DH = 'NP-DH'
    NP_GA = 'NP-GA'
    NP_JA = 'NP-JA'
    NP_KA = 'NP-KA'
    NP_KO = 'NP-KO'
    NP_LU = 'NP-LU'
    NP_MA = 'NP-MA'
    NP_ME = 'NP-ME'
    NP_NA = 'NP-NA'
    NP_P1 = 'NP-P1'
    NP_P2 = 'NP-P2'
    NP_P3 = 'NP-P3'
    NP_P4 = 'NP-P4'
    NP_P5 = 'NP-P5'
    NP_P6 = 'NP-P6'
    NP_P7 = 'NP-P7'
    NP_RA = 'NP-RA'
    NP_SA = 'NP-SA'
    NP_SE = 'NP-SE'
    NR_01 = 'NR-01'
    NR_02 = 'NR-02'
    NR_03 = 'NR-03'
    NR_04 = 'NR-04'
    NR_05 = 'NR-05'
    NR_06 = 'NR-06'
    NR_07 = 'NR-07'
    NR_08 = 'NR-08'
    NR_09 = 'NR-09'
    NR_10 = 'NR-10'
    NR_11 = 'NR-11'
    NR_12 = 'NR-12'
    NR_13 = 'NR-13'
    NR_14 = 'NR-14'
    NZ_AUK = 'NZ-AUK'
    NZ_BOP = 'NZ-BOP'
    NZ_CAN = 'NZ-CAN'
    NZ_CIT = 'NZ-CIT'
    NZ_GIS = 'NZ-GIS'
    NZ_HKB = 'NZ-HKB'
    NZ_MBH = 'NZ-MBH'
    NZ_MWT = 'NZ-MWT'
    NZ_NSN = 'NZ-NSN'
    NZ_NTL = 'NZ-NTL'
    NZ_OTA = 'NZ-OTA'
    NZ_STL = 'NZ-STL'
    NZ_TAS = 'NZ-TAS'
    NZ_TKI = 'NZ-TKI'
    NZ_WGN = 'NZ-WGN'
    NZ_WKO = 'NZ-WKO'
    NZ_WTC = 'NZ-WTC'
    OM_BJ = 'OM-BJ'
    OM_BS = 'OM-BS'
    OM_BU = 'OM-BU'
    OM_DA = 'OM-DA'
    OM_MA = 'OM-MA'
    OM_MU = 'OM-MU'
    OM_SJ = 'OM-SJ'
    OM_SS = 'OM-SS'
    OM_WU = 'OM-WU'
    OM_ZA = 'OM-ZA'
    OM_ZU = 'OM-ZU'
    PA_1 = 'PA-1'
    PA_10 = 'PA-10'
    PA_2 = 'PA-2'
    PA_3 = 'PA-3'
    PA_4 = 'PA-4'
    PA_5 = 'PA-5'
    PA_6 = 'PA-6'
    PA_7 = 'PA-7'
    PA_8 = 'PA-8'
    PA_9 = 'PA-9'
    PA_EM = 'PA-EM'
    PA_KY = 'PA-KY'
    PA_NB = 'PA-NB'
    PE_AMA = 'PE-AMA'
    PE_ANC = 'PE-ANC'
    PE_APU = 'PE-APU'
    PE_ARE = 'PE-ARE'
    PE_AYA = 'PE-AYA'
    PE_CAJ = 'PE-CAJ'
    PE_CAL = 'PE-CAL'
    PE_CUS = 'PE-CUS'
    PE_HUC = 'PE-HUC'
    PE_HUV = 'PE-HUV'
    PE_ICA = 'PE-ICA'
    PE_JUN = 'PE-JUN'
    PE_LAL = 'PE-LAL'
    PE_LAM = 'PE-LAM'
    PE_LIM = 'PE-LIM'
    PE_LMA = 'PE-LMA'
    PE_LOR = 'PE-LOR'
    PE_MDD = 'PE-MDD'
    PE_MOQ = 'PE-MOQ'
    PE_PAS = 'PE-PAS'
    PE_PIU = 'PE-PIU'
    PE_PUN = 'PE-PUN'
    PE_SAM = 'PE-SAM'
    PE_TAC = 'PE-TAC'
    PE_TUM = 'PE-TUM'
    PE_UCA = 'PE-UCA'
    PG_CPK = 'PG-CPK'
    PG_CPM = 'PG-CPM'
    PG_EBR = 'PG-EBR'
    PG_EHG = 'PG-EHG'
    PG_EPW = 'PG-EPW'
    PG_ESW = 'PG-ESW'
    PG_GPK = 'PG-GPK'
    PG_HLA = 'PG-HLA'
    PG_JWK = 'PG-JWK'
    PG_MBA = 'PG-MBA'
    PG_MPL = 'PG-MPL'
    PG_MPM = 'PG-MPM'
    PG_MRL = 'PG-MRL'
    PG_NCD = 'PG-NCD'
    PG_NIK = 'PG-NIK'
    PG_NPP = 'PG-NPP'
    PG_NSB = 'PG-NSB'
    PG_SAN = 'PG-SAN'
    PG_SHM = 'PG-SHM'
    PG_WBK = 'PG-WBK'
    PG_WHM = 'PG-WHM'
    PG_WPD = 'PG-WPD'
    PH_00 = 'PH-00'
    PH_01 = 'PH-01'
    PH_02 = 'PH-02'
    PH_03 = 'PH-03'
    PH_05 = 'PH-05'
    PH_06 = 'PH-06'
    PH_07 = 'PH-07'
    PH_08 = 'PH-08'
    PH_09 = 'PH-09'
    PH_10 = 'PH-10'
    PH_11 = 'PH-11'
    PH_12 = 'PH-12'
    PH_13 = 'PH-13'
    PH_14 = 'PH-14'
    PH_15 = 'PH-15'
    PH_40 = 'PH-40'
    PH_41 = 'PH-41'
    PH_ABR = 'PH-ABR'
    PH_AGN = 'PH-AGN'
    PH_AGS = 'PH-AGS'
    PH_AKL = 'PH-AKL'
    PH_ALB = 'PH-ALB'
    PH_ANT = 'PH-ANT'
    PH_APA = 'PH-APA'
    PH_AUR = 'PH-AUR'
    PH_BAN = 'PH-BAN'
    PH_BAS = 'PH-BAS'
    PH_BEN = 'PH-BEN'
    PH_BIL = 'PH-BIL'
    PH_BOH = 'PH-BOH'
    PH_BTG = 'PH-BTG'
    PH_BTN = 'PH-BTN'
    PH_BUK = 'PH-BUK'
    PH_BUL = 'PH-BUL'
    PH_CAG = 'PH-CAG'
    PH_CAM = 'PH-CAM'
    PH_CAN = 'PH-CAN'
    PH_CAP = 'PH-CAP'
    PH_CAS = 'PH-CAS'
    PH_CAT = 'PH-CAT'
    PH_CAV = 'PH-CAV'
    PH_CEB = 'PH-CEB'
    PH_COM = 'PH-COM'
    PH_DAO = 'PH-DAO'
    PH_DAS = 'PH-DAS'
    PH_DAV = 'PH-DAV'
    PH_DIN = 'PH-DIN'
    PH_DVO = 'PH-DVO'
    PH_EAS = 'PH-EAS'
    PH_GUI = 'PH-GUI'
    PH_IFU = 'PH-IFU'
    PH_ILI = 'PH-ILI'
    PH_ILN = 'PH-ILN'
    PH_ILS = 'PH-ILS'
    PH_ISA = 'PH-ISA'
    PH_KAL = 'PH-KAL'
    PH_LAG = 'PH-LAG'
    PH_LAN = 'PH-LAN'
    PH_LAS = 'PH-LAS'
    PH_LEY = 'PH-LEY'
    PH_LUN = 'PH-LUN'
    PH_MAD = 'PH-MAD'
    PH_MAG = 'PH-MAG'
    PH_MAS = 'PH-MAS'
    PH_MDC = 'PH-MDC'
    PH_MDR = 'PH-MDR'
    PH_MOU = 'PH-MOU'
    PH_MSC = 'PH-MSC'
    PH_MSR = 'PH-MSR'
    PH_NCO = 'PH-NCO'
    PH_NEC = 'PH-NEC'
    PH_NER = 'PH-NER'
    PH_NSA = 'PH-NSA'
    PH_NUE = 'PH-NUE'
    PH_NUV = 'PH-NUV'
    PH_PAM = 'PH-PAM'
    PH_PAN = 'PH-PAN'
    PH_PLW = 'PH-PLW'
    PH_QUE = 'PH-QUE'
    PH_QUI = 'PH-QUI'
    PH_RIZ = 'PH-RIZ'
    PH_ROM = 'PH-ROM'
    PH_SAR = 'PH-SAR'
    PH_SCO = 'PH-SCO'
    PH_SIG = 'PH-SIG'
    PH_SLE = 'PH-SLE'
    PH_SLU = 'PH-SLU'
    PH_SOR = 'PH-SOR'
    PH_SUK = 'PH-SUK'
    PH_SUN = 'PH-SUN'
    PH_SUR = 'PH-SUR'
    PH_TAR = 'PH-TAR'
    PH_TAW = 'PH-TAW'
    PH_WSA = 'PH-WSA'
    PH_ZAN = 'PH-ZAN'
    PH_ZAS = 'PH-ZAS'
    PH_ZMB = 'PH-ZMB'
    PH_ZSI = 'PH-ZSI'
    PK_BA = 'PK-BA'
    PK_GB = 'PK-GB'
    PK_IS = 'PK-IS'
    PK_JK = 'PK-JK'
    PK_KP = 'PK-KP'
    PK_PB = 'PK-PB'
    PK_SD = 'PK-SD'
    PL_02 = 'PL-02'
    PL_04 = 'PL-04'
    PL_06 = 'PL-06'
    PL_08 = 'PL-08'
    PL_10 = 'PL-10'
    PL_12 = 'PL-12'
    PL_14 = 'PL-14'
    PL_16 = 'PL-16'
    PL_18 = 'PL-18'
    PL_20 = 'PL-20'
    PL_22 = 'PL-22'
    PL_24 = 'PL-24'
    PL_26 = 'PL-26'
    PL_28 = 'PL-28'
    PL_30 = 'PL-30'
    PL_32 = 'PL-32'
    PS_BTH = 'PS-BTH'
    PS_DEB = 'PS-DEB'
    PS_GZA = 'PS-GZA'
    PS_HBN = 'PS-HBN'
    PS_JEM = 'PS-JEM'
    PS_JEN = 'PS-JEN'
    PS_JRH = 'PS-JRH'
    PS_KYS = 'PS-KYS'
    PS_NBS = 'PS-NBS'
    PS_NGZ = 'PS-NGZ'
    PS_QQA = 'PS-QQA'
    PS_RBH = 'PS-RBH'
    PS_RFH = 'PS-RFH'
    PS_SLT = 'PS-SLT'
    PS_TBS = 'PS-TBS'
    PS_TKM = 'PS-TKM'
    PT_01 = 'PT-01'
    PT_02 = 'PT-02'
    PT_03 = 'PT-03'
    PT_04 = 'PT-04'
    PT_05 = 'PT-05'
    PT_06 = 'PT-06'
    PT_07 = 'PT-07'
    PT_08 = 'PT-08'
    PT_09 = 'PT-09'
    PT_10 = 'PT-10'
    PT_11 = 'PT-11'
    PT_12 = 'PT-12'
    PT_13 = 'PT-13'
    PT_14 = 'PT-14'
    PT_15 = 'PT-15'
    PT_16 = 'PT-16'
    PT_17 = 'PT-17'
    PT_18 = 'PT-18'
    PT_20 = 'PT-20'
    PT_30 = 'PT-30'
    PW_002 = 'PW-002'
    PW_004 = 'PW-004'
    PW_010 = 'PW-010'
    PW_050 = 'PW-050'
    PW_100 = 'PW-100'
    PW_150 = 'PW-150'
    PW_212 = 'PW-212'
    PW_214 = 'PW-214'
    PW_218 = 'PW-218'
    PW_222 = 'PW-222'
    PW_224 = 'PW-224'
    PW_226 = 'PW-226'
    PW_227 = 'PW-227'
    PW_228 = 'PW-228'
    PW_350 = 'PW-350'
    PW_370 = 'PW-370'
    PY_1 = 'PY-1'
    PY_10 = 'PY-10'
    PY_11 = 'PY-11'
    PY_12 = 'PY-12'
    PY_13 = 'PY-13'
    PY_14 = 'PY-14'
    PY_15 = 'PY-15'
    PY_16 = 'PY-16'
    PY_19 = 'PY-19'
    PY_2 = 'PY-2'
    PY_3 = 'PY-3'
    PY_4 = 'PY-4'
    PY_5 = 'PY-5'
    PY_6 = 'PY-6'
    PY_7 = 'PY-7'
    PY_8 = 'PY-8'
    PY_9 = 'PY-9'
    PY_ASU = 'PY-ASU'
    QA_DA = 'QA-DA'
    QA_KH = 'QA-KH'
    QA_MS = 'QA-MS'
    QA_RA = 'QA-RA'
    QA_SH = 'QA-SH'
    QA_US = 'QA-US'
    QA_WA = 'QA-WA'
    QA_ZA = 'QA-ZA'
    RO_AB = 'RO-AB'
    RO_AG = 'RO-AG'
    RO_AR = 'RO-AR'
    RO_B = 'RO-B'
    RO_BC = 'RO-BC'
    RO_BH = 'RO-BH'
    RO_BN = 'RO-BN'
    RO_BR = 'RO-BR'
    RO_BT = 'RO-BT'
    RO_BV = 'RO-BV'
    RO_BZ = 'RO-BZ'
    RO_CJ = 'RO-CJ'
    RO_CL = 'RO-CL'
    RO_CS = 'RO-CS'
    RO_CT = 'RO-CT'
    RO_CV = 'RO-CV'
    RO_DB = 'RO-DB'
    RO_DJ = 'RO-DJ'
    RO_GJ = 'RO-GJ'
    RO_GL = 'RO-GL'
    RO_GR = 'RO-GR'
    RO_HD = 'RO-HD'
    RO_HR = 'RO-HR'
    RO_IF = 'RO-IF'
    RO_IL = 'RO-IL'
    RO_IS = 'RO-IS'
    RO_MH = 'RO-MH'
    RO_MM = 'RO-MM'
    RO_MS = 'RO-MS'
    RO_NT = 'RO-NT'
    RO_OT = 'RO-OT'
    RO_PH = 'RO-PH'
    RO_SB = 'RO-SB'
    RO_SJ = 'RO-SJ'
    RO_SM = 'RO-SM'
    RO_SV = 'RO-SV'
    RO_TL = 'RO-TL'
    RO_TM = 'RO-TM'
    RO_TR = 'RO-TR'
    RO_VL = 'RO-VL'
    RO_VN = 'RO-VN'
    RO_VS = 'RO-VS'
    RS_00 = 'RS-00'
    RS_01 = 'RS-01'
    RS_02 = 'RS-02'
    RS_03 = 'RS-03'
    RS_04 = 'RS-04'
    RS_05 = 'RS-05'
    RS_06 = 'RS-06'
    RS_07 = 'RS-07'
    RS_08 = 'RS-08'
    RS_09 = 'RS-09'
    RS_10 = 'RS-10'
    RS_11 = 'RS-11'
    RS_12 = 'RS-12'
    RS_13 = 'RS-13'
    RS_14 = 'RS-14'
    RS_15 = 'RS-15'
    RS_16 = 'RS-16'
    RS_17 = 'RS-17'
    RS_18 = 'RS-18'
    RS_19 = 'RS-19'
    RS_20 = 'RS-20'
    RS_21 = 'RS-21'
    RS_22 = 'RS-22'
    RS_23 = 'RS-23'
    RS_24 = 'RS-24'
    RS_25 = 'RS-25'
    RS_26 = 'RS-26'
    RS_27 = 'RS-27'
    RS_28 = 'RS-28'
    RS_29 = 'RS-29'
    RS_KM = 'RS-KM'
    RS_VO = 'RS-VO'
    RU_AD = 'RU-AD'
    RU_AL = 'RU-AL'
    RU_ALT = 'RU-ALT'
    RU_AMU = 'RU-AMU'
    RU_ARK = 'RU-ARK'
    RU_AST = 'RU-AST'
    RU_BA = 'RU-BA'
    RU_BEL = 'RU-BEL'
    RU_BRY = 'RU-BRY'
    RU_BU = 'RU-BU'
    RU_CE = 'RU-CE'
    RU_CHE = 'RU-CHE'
    RU_CHU = 'RU-CHU'
    RU_CU = 'RU-CU'
    RU_DA = 'RU-DA'
    RU_IN = 'RU-IN'
    RU_IRK = 'RU-IRK'
    RU_IVA = 'RU-IVA'
    RU_KAM = 'RU-KAM'
    RU_KB = 'RU-KB'
    RU_KC = 'RU-KC'
    RU_KDA = 'RU-KDA'
    RU_KEM = 'RU-KEM'
    RU_KGD = 'RU-KGD'
    RU_KGN = 'RU-KGN'
    RU_KHA = 'RU-KHA'
    RU_KHM = 'RU-KHM'
    RU_KIR = 'RU-KIR'
    RU_KK = 'RU-KK'
    RU_KL = 'RU-KL'
    RU_KLU = 'RU-KLU'
    RU_KO = 'RU-KO'
    RU_KOS = 'RU-KOS'
    RU_KR = 'RU-KR'
    RU_KRS = 'RU-KRS'
    RU_KYA = 'RU-KYA'
    RU_LEN = 'RU-LEN'
    RU_LIP = 'RU-LIP'
    RU_MAG = 'RU-MAG'
    RU_ME = 'RU-ME'
    RU_MO = 'RU-MO'
    RU_MOS = 'RU-MOS'
    RU_MOW = 'RU-MOW'
    RU_MUR = 'RU-MUR'
    RU_NEN = 'RU-NEN'
    RU_NGR = 'RU-NGR'
    RU_NIZ = 'RU-NIZ'
    RU_NVS = 'RU-NVS'
    RU_OMS = 'RU-OMS'
    RU_ORE = 'RU-ORE'
    RU_ORL = 'RU-ORL'
    RU_PER = 'RU-PER'
    RU_PNZ = 'RU-PNZ'
    RU_PRI = 'RU-PRI'
    RU_PSK = 'RU-PSK'
    RU_ROS = 'RU-ROS'
    RU_RYA = 'RU-RYA'
    RU_SA = 'RU-SA'
    RU_SAK = 'RU-SAK'
    RU_SAM = 'RU-SAM'
    RU_SAR = 'RU-SAR'
    RU_SE = 'RU-SE'
    RU_SMO = 'RU-SMO'
    RU_SPE = 'RU-SPE'
    RU_STA = 'RU-STA'
    RU_SVE = 'RU-SVE'
    RU_TA = 'RU-TA'
    RU_TAM = 'RU-TAM'
    RU_TOM = 'RU-TOM'
    RU_TUL = 'RU-TUL'
    RU_TVE = 'RU-TVE'
    RU_TY = 'RU-TY'
    RU_TYU = 'RU-TYU'
    RU_UD = 'RU-UD'
    RU_ULY = 'RU-ULY'
    RU_VGG = 'RU-VGG'
    RU_VLA = 'RU-VLA'
    RU_VLG = 'RU-VLG'
    RU_VOR = 'RU-VOR'
    RU_YAN = 'RU-YAN'
    RU_YAR = 'RU-YAR'
    RU_YEV = 'RU-YEV'
    RU_ZAB = 'RU-ZAB'
    RW_01 = 'RW-01'
    RW_02 = 'RW-02'
    RW_03 = 'RW-03'
    RW_04 = 'RW-04'
    RW_05 = 'RW-05'
    SA_01 = 'SA-01'
    SA_02 = 'SA-02'
    SA_03 = 'SA-03'
    SA_04 = 'SA-04'
    SA_05 = 'SA-05'
    SA_06 = 'SA-06'
    SA_07 = 'SA-07'
    SA_08 = 'SA-08'
    SA_09 = 'SA-09'
    SA_10 = 'SA-10'
    SA_11 = 'SA-11'
    SA_12 = 'SA-12'
    SA_14 = 'SA-14'
    SB_CE = 'SB-CE'
    SB_CH = 'SB-CH'
    SB_CT = 'SB-CT'
    SB_GU = 'SB-GU'
    SB_IS = 'SB-IS'
    SB_MK = 'SB-MK'
    SB_ML = 'SB-ML'
    SB_RB = 'SB-RB'
    SB_TE = 'SB-TE'
    SB_WE = 'SB-WE'
    SC_01 = 'SC-01'
    SC_02 = 'SC-02'
    SC_03 = 'SC-03'
    SC_04 = 'SC-04'
    SC_05 = 'SC-05'
    SC_06 = 'SC-06'
    SC_07 = 'SC-07'
    SC_08 = 'SC-08'
    SC_09 = 'SC-09'
    SC_10 = 'SC-10'
    SC_11 = 'SC-11'
    SC_12 = 'SC-12'
    SC_13 = 'SC-13'
    SC_14 = 'SC-14'
    SC_15 = 'SC-15'
    SC_16 = 'SC-16'
    SC_17 = 'SC-17'
    SC_18 = 'SC-18'
    SC_19 = 'SC-19'
    SC_20 = 'SC-20'
    SC_21 = 'SC-21'
    SC_22 = 'SC-22'
    SC_23 = 'SC-23'
    SC_24 = 'SC-24'
    SC_25 = 'SC-25'
    SC_26 = 'SC-26'
    SC_27 = 'SC-27'
    SD_DC = 'SD-DC'
    SD_DE = 'SD-DE'
    SD_DN = 'SD-DN'
    SD_DS = 'SD-DS'
    SD_DW = 'SD-DW'
    SD_GD = 'SD-GD'
    SD_GK = 'SD-GK'
    SD_GZ = 'SD-GZ'
    SD_KA = 'SD-KA'
    SD_KH = 'SD-KH'
    SD_KN = 'SD-KN'
    SD_KS = 'SD-KS'
    SD_NB = 'SD-NB'
    SD_NO = 'SD-NO'
    SD_NR = 'SD-NR'
    SD_NW = 'SD-NW'
    SD_RS = 'SD-RS'
    SD_SI = 'SD-SI'
    SE_AB = 'SE-AB'
    SE_AC = 'SE-AC'
    SE_BD = 'SE-BD'
    SE_C = 'SE-C'
    SE_D = 'SE-D'
    SE_E = 'SE-E'
    SE_F = 'SE-F'
    SE_G = 'SE-G'
    SE_H = 'SE-H'
    SE_I = 'SE-I'
    SE_K = 'SE-K'
    SE_M = 'SE-M'
    SE_N = 'SE-N'
    SE_O = 'SE-O'
    SE_S = 'SE-S'
    SE_T = 'SE-T'
    SE_U = 'SE-U'
    SE_W = 'SE-W'
    SE_X = 'SE-X'
    SE_Y = 'SE-Y'
    SE_Z = 'SE-Z'
    SG_01 = 'SG-01'
    SG_02 = 'SG-02'
    SG_03 = 'SG-03'
    SG_04 = 'SG-04'
    SG_05 = 'SG-05'
    SH_AC = 'SH-AC'
    SH_HL = 'SH-HL'
    SH_TA = 'SH-TA'
    SI_001 = 'SI-001'
    SI_002 = 'SI-002'
    SI_003 = 'SI-003'
    SI_004 = 'SI-004'
    SI_005 = 'SI-005'
    SI_006 = 'SI-006'
    SI_007 = 'SI-007'
    SI_008 = 'SI-008'
    SI_009 = 'SI-009'
    SI_010 = 'SI-010'
    SI_011 = 'SI-011'
    SI_012 = 'SI-012'
    SI_013 = 'SI-013'
    SI_014 = 'SI-014'
    SI_015 = 'SI-015'
    SI_016 = 'SI-016'
    SI_017 = 'SI-017'
    SI_018 = 'SI-018'
    SI_019 = 'SI-019'
    SI_020 = 'SI-020'
    SI_021 = 'SI-021'
    SI_022 = 'SI-022'
    SI_023 = 'SI-023'
    SI_024 = 'SI-024'
    SI_025 = 'SI-025'
    SI_026 = 'SI-026'
    SI_027 = 'SI-027'
    SI_028 = 'SI-028'
    SI_029 = 'SI-029'
    SI_030 = 'SI-030'
    SI_031 = 'SI-031'
    SI_032 = 'SI-032'
    SI_033 = 'SI-033'
    SI_034 = 'SI-034'
    SI_035 = 'SI-035'
    SI_036 = 'SI-036'
    SI_037 = 'SI-037'
    SI_038 = 'SI-038'
    SI_039 = 'SI-039'
    SI_040 = 'SI-040'
    SI_041 = 'SI-041'
    SI_042 = 'SI-042'
    SI_043 = 'SI-043'
    SI_044 = 'SI-044'
    SI_045 = 'SI-045'
    SI_046 = 'SI-046'
    SI_047 = 'SI-047'
    SI_048 = 'SI-048'
    SI_049 = 'SI-049'
    SI_050 = 'SI-050'
    SI_051 = 'SI-051'
    SI_052 = 'SI-052'
    SI_053 = 'SI-053'
    SI_054 = 'SI-054'
    SI_055 = 'SI-055'
    SI_056 = 'SI-056'
    SI_057 = 'SI-057'
    SI_058 = 'SI-058'
    SI_059 = 'SI-059'
    SI_060 = 'SI-060'
    SI_061 = 'SI-061'
    SI_062 = 'SI-062'
    SI_063 = 'SI-063'
    SI_064 = 'SI-064'
    SI_065 = 'SI-065'
    SI_066 = 'SI-066'
    SI_067 = 'SI-067'
    SI_068 = 'SI-068'
    SI_069 = 'SI-069'
    SI_070 = 'SI-070'
    SI_071 = 'SI-071'
    SI_072 = 'SI-072'
    SI_073 = 'SI-073'
    SI_074 = 'SI-074'
    SI_075 = 'SI-075'
    SI_076 = 'SI-076'
    SI_077 = 'SI-077'
    SI_078 = 'SI-078'
    SI_079 = 'SI-079'
    SI_080 = 'SI-080'
    SI_081 = 'SI-081'
    SI_082 = 'SI-082'
    SI_083 = 'SI-083'
    SI_084 = 'SI-084'
    SI_085 = 'SI-085'
    SI_086 = 'SI-086'
    SI_087 = 'SI-087'
    SI_088 = 'SI-088'
    SI_089 = 'SI-089'
    SI_090 = 'SI-090'
    SI_091 = 'SI-091'
    SI_092 = 'SI-092'
    SI_093 = 'SI-093'
    SI_094 = 'SI-094'
    SI_095 = 'SI-095'
    SI_096 = 'SI-096'
    SI_097 = 'SI-097'
    SI_098 = 'SI-098'
    SI_099 = 'SI-099'
    SI_100 = 'SI-100'
    SI_101 = 'SI-101'
    SI_102 = 'SI-102'
    SI_103 = 'SI-103'
    SI_104 = 'SI-104'
    SI_105 = 'SI-105'
    SI_106 = 'SI-106'
    SI_107 = 'SI-107'
    SI_108 = 'SI-108'
    SI_109 = 'SI-109'
    SI_110 = 'SI-110'
    SI_111 = 'SI-111'
    SI_112 = 'SI-112'
    SI_113 = 'SI-113'
    SI_114 = 'SI-114'
    SI_115 = 'SI-115'
    SI_116 = 'SI-116'
    SI_117 = 'SI-117'
    SI_118 = 'SI-118'
    SI_119 = 'SI-119'
    SI_120 = 'SI-120'
    SI_121 = 'SI-121'
    SI_122 = 'SI-122'
    SI_123 = 'SI-123'
    SI_124 = 'SI-124'
    SI_125 = 'SI-125'
    SI_126 = 'SI-126'
    SI_127 = 'SI-127'
    SI_128 = 'SI-128'
    SI_129 = 'SI-129'
    SI_130 = 'SI-130'
    SI_131 = 'SI-131'
    SI_132 = 'SI-132'
    SI_133 = 'SI-133'
    SI_134 = 'SI-134'
    SI_135 = 'SI-135'
    SI_136 = 'SI-136'
    SI_137 = 'SI-137'
    SI_138 = 'SI-138'
    SI_139 = 'SI-139'
    SI_140 = 'SI-140'
    SI_141 = 'SI-141'
    SI_142 = 'SI-142'
    SI_143 = 'SI-143'
    SI_144 = 'SI-144'
    SI_146 = 'SI-146'
    SI_147 = 'SI-147'
    SI_148 = 'SI-148'
    SI_149 = 'SI-149'
    SI_150 = 'SI-150'
    SI_151 = 'SI-151'
    SI_152 = 'SI-152'
    SI_153 = 'SI-153'
    SI_154 = 'SI-154'
    SI_155 = 'SI-155'
    SI_156 = 'SI-156'
    SI_157 = 'SI-157'
    SI_158 = 'SI-158'
    SI_159 = 'SI-159'
    SI_160 = 'SI-160'
    SI_161 = 'SI-161'
    SI_162 = 'SI-162'
    SI_163 = 'SI-163'
    SI_164 = 'SI-164'
    SI_165 = 'SI-165'
    SI_166 = 'SI-166'
    SI_167 = 'SI-167'
    SI_168 = 'SI-168'
    SI_169 = 'SI-169'
    SI_170 = 'SI-170'
    SI_171 = 'SI-171'
    SI_172 = 'SI-172'
    SI_173 = 'SI-173'
    SI_174 = 'SI-174'
    SI_175 = 'SI-175'
    SI_176 = 'SI-176'
    SI_177 = 'SI-177'
    SI_178 = 'SI-178'
    SI_179 = 'SI-179'
    SI_180 = 'SI-180'
    SI_181 = 'SI-181'
    SI_182 = 'SI-182'
    SI_183 = 'SI-183'
    SI_184 = 'SI-184'
    SI_185 = 'SI-185'
    SI_186 = 'SI-186'
    SI_187 = 'SI-187'
    SI_188 = 'SI-188'
    SI_189 = 'SI-189'
    SI_190 = 'SI-190'
    SI_191 = 'SI-191'
    SI_192 = 'SI-192'
    SI_193 = 'SI-193'
    SI_194 = 'SI-194'
    SI_195 = 'SI-195'
    SI_196 = 'SI-196'
    SI_197 = 'SI-197'
    SI_198 = 'SI-198'
    SI_199 = 'SI-199'
    SI_200 = 'SI-200'
    SI_201 = 'SI-201'
    SI_202 = 'SI-202'
    SI_203 = 'SI-203'
    SI_204 = 'SI-204'
    SI_205 = 'SI-205'
    SI_206 = 'SI-206'
    SI_207 = 'SI-207'
    SI_208 = 'SI-208'
    SI_209 = 'SI-209'
    SI_210 = 'SI-210'
    SI_211 = 'SI-211'
    SI_212 = 'SI-212'
    SI_213 = 'SI-213'
    SK_BC = 'SK-BC'
    SK_BL = 'SK-BL'
    SK_KI = 'SK-KI'
    SK_NI = 'SK-NI'
    SK_PV = 'SK-PV'
    SK_TA = 'SK-TA'
    SK_TC = 'SK-TC'
    SK_ZI = 'SK-ZI'
    SL_E = 'SL-E'
    SL_N = 'SL-N'
    SL_NW = 'SL-NW'
    SL_S = 'SL-S'
    SL_W = 'SL-W'
    SM_01 = 'SM-01'
    SM_02 = 'SM-02'
    SM_03 = 'SM-03'
    SM_04 = 'SM-04'
    SM_05 = 'SM-05'
    SM_06 = 'SM-06'
    SM_07 = 'SM-07'
    SM_08 = 'SM-08'
    SM_09 = 'SM-09'
    SN_DB = 'SN-DB'
    SN_DK = 'SN-DK'
    SN_FK = 'SN-FK'
    SN_KA = 'SN-KA'
    SN_KD = 'SN-KD'
    SN_KE = 'SN-KE'
    SN_KL = 'SN-KL'
    SN_LG = 'SN-LG'
    SN_MT = 'SN-MT'
    SN_SE = 'SN-SE'
    SN_SL = 'SN-SL'
    SN_TC = 'SN-TC'
    SN_TH = 'SN-TH'
    SN_ZG = 'SN-ZG'
    SO_AW = 'SO-AW'
    SO_BK = 'SO-BK'
    SO_BN = 'SO-BN'
    SO_BR = 'SO-BR'
    SO_BY = 'SO-BY'
    SO_GA = 'SO-GA'
    SO_GE = 'SO-GE'
    SO_HI = 'SO-HI'
    SO_JD = 'SO-JD'
    SO_JH = 'SO-JH'
    SO_MU = 'SO-MU'
    SO_NU = 'SO-NU'
    SO_SA = 'SO-SA'
    SO_SD = 'SO-SD'
    SO_SH = 'SO-SH'
    SO_SO = 'SO-SO'
    SO_TO = 'SO-TO'
    SO_WO = 'SO-WO'
    SR_BR = 'SR-BR'
    SR_CM = 'SR-CM'
    SR_CR = 'SR-CR'
    SR_MA = 'SR-MA'
    SR_NI = 'SR-NI'
    SR_PM = 'SR-PM'
    SR_PR = 'SR-PR'
    SR_SA = 'SR-SA'
    SR_SI = 'SR-SI'
    SR_WA = 'SR-WA'
    SS_BN = 'SS-BN'
    SS_BW = 'SS-BW'
    SS_EC = 'SS-EC'
    SS_EE = 'SS-EE'
    SS_EW = 'SS-EW'
    SS_JG = 'SS-JG'
    SS_LK = 'SS-LK'
    SS_NU = 'SS-NU'
    SS_UY = 'SS-UY'
    SS_WR = 'SS-WR'
    ST_01 = 'ST-01'
    ST_02 = 'ST-02'
    ST_03 = 'ST-03'
    ST_04 = 'ST-04'
    ST_05 = 'ST-05'
    ST_06 = 'ST-06'
    ST_P = 'ST-P'
    SV_AH = 'SV-AH'
    SV_CA = 'SV-CA'
    SV_CH = 'SV-CH'
    SV_CU = 'SV-CU'
    SV_LI = 'SV-LI'
    SV_MO = 'SV-MO'
    SV_PA = 'SV-PA'
    SV_SA = 'SV-SA'
    SV_SM = 'SV-SM'
    SV_SO = 'SV-SO'
    SV_SS = 'SV-SS'
    SV_SV = 'SV-SV'
    SV_UN = 'SV-UN'
    SV_US = 'SV-US'
    SY_DI = 'SY-DI'
    SY_DR = 'SY-DR'
    SY_DY = 'SY-DY'
    SY_HA = 'SY-HA'
    SY_HI = 'SY-HI'
    SY_HL = 'SY-HL'
    SY_HM = 'SY-HM'
    SY_ID = 'SY-ID'
    SY_LA = 'SY-LA'
    SY_QU = 'SY-QU'
    SY_RA = 'SY-RA'
    SY_RD = 'SY-RD'
    SY_SU = 'SY-SU'
    SY_TA = 'SY-TA'
    SZ_HH = 'SZ-HH'
    SZ_LU = 'SZ-LU'
    SZ_MA = 'SZ-MA'
    SZ_SH = 'SZ-SH'
    TD_BA = 'TD-BA'
    TD_BG = 'TD-BG'
    TD_BO = 'TD-BO'
    TD_CB = 'TD-CB'
    TD_EE = 'TD-EE'
    TD_EO = 'TD-EO'
    TD_GR = 'TD-GR'
    TD_HL = 'TD-HL'
    TD_KA = 'TD-KA'
    TD_LC = 'TD-LC'
    TD_LO = 'TD-LO'
    TD_LR = 'TD-LR'
    TD_MA = 'TD-MA'
    TD_MC = 'TD-MC'
    TD_ME = 'TD-ME'
    TD_MO = 'TD-MO'
    TD_ND = 'TD-ND'
    TD_OD = 'TD-OD'
    TD_SA = 'TD-SA'
    TD_SI = 'TD-SI'
    TD_TA = 'TD-TA'
    TD_TI = 'TD-TI'
    TD_WF = 'TD-WF'
    TG_C = 'TG-C'
    TG_K = 'TG-K'
    TG_M = 'TG-M'
    TG_P = 'TG-P'
    TG_S = 'TG-S'
    TH_10 = 'TH-10'
    TH_11 = 'TH-11'
    TH_12 = 'TH-12'
    TH_13 = 'TH-13'
    TH_14 = 'TH-14'
    TH_15 = 'TH-15'
    TH_16 = 'TH-16'
    TH_17 = 'TH-17'
    TH_18 = 'TH-18'
    TH_19 = 'TH-19'
    TH_20 = 'TH-20'
    TH_21 = 'TH-21'
    TH_22 = 'TH-22'
    TH_23 = 'TH-23'
    TH_24 = 'TH-24'
    TH_25 = 'TH-25'
    TH_26 = 'TH-26'
    TH_27 = 'TH-27'
    TH_30 = 'TH-30'
    TH_31 = 'TH-31'
    TH_32 = 'TH-32'
    TH_33 = 'TH-33'
    TH_34 = 'TH-34'
    TH_35 = 'TH-35'
    TH_36 = 'TH-36'
    TH_37 = 'TH-37'
    TH_38 = 'TH-38'
    TH_39 = 'TH-39'
    TH_40 = 'TH-40'
    TH_41 = 'TH-41'
    TH_42 = 'TH-42'
    TH_43 = 'TH-43'
    TH_44 = 'TH-44'
    TH_45 = 'TH-45'
    TH_46 = 'TH-46'
    TH_47 = 'TH-47'
    TH_48 = 'TH-48'
    TH_49 = 'TH-49'
    TH_50 = 'TH-50'
    TH_51 = 'TH-51'
    TH_52 = 'TH-52'
    TH_53 = 'TH-53'
    TH_54 = 'TH-54'
    TH_55 = 'TH-55'
    TH_56 = 'TH-56'
    TH_57 = 'TH-57'
    TH_58 = 'TH-58'
    TH_60 = 'TH-60'
    TH_61 = 'TH-61'
    TH_62 = 'TH-62'
    TH_63 = 'TH-63'
    TH_64 = 'TH-64'
    TH_65 = 'TH-65'
    TH_66 = 'TH-66'
    TH_67 = 'TH-67'
    TH_70 = 'TH-70'
    TH_71 = 'TH-71'
    TH_72 = 'TH-72'
    TH_73 = 'TH-73'
    TH_74 = 'TH-74'
    TH_75 = 'TH-75'
    TH_76 = 'TH-76'
    TH_77 = 'TH-77'
    TH_80 = 'TH-80'
    TH_81 = 'TH-81'
    TH_82 = 'TH-82'
    TH_83 = 'TH-83'
    TH_84 = 'TH-84'
    TH_85 = 'TH-85'
    TH_86 = 'TH-86'
    TH_90 = 'TH-90'
    TH_91 = 'TH-91'
    TH_92 = 'TH-92'
    TH_93 = 'TH-93'
    TH_94 = 'TH-94'
    TH_95 = 'TH-95'
    TH_96 = 'TH-96'
    TH_S = 'TH-S'
    TJ_DU = 'TJ-DU'
    TJ_GB = 'TJ-GB'
    TJ_KT = 'TJ-KT'
    TJ_RA = 'TJ-RA'
    TJ_SU = 'TJ-SU'
    TL_AL = 'TL-AL'
    TL_AN = 'TL-AN'
    TL_BA = 'TL-BA'
    TL_BO = 'TL-BO'
    TL_CO = 'TL-CO'
    TL_DI = 'TL-DI'
    TL_ER = 'TL-ER'
    TL_LA = 'TL-LA'
    TL_LI = 'TL-LI'
    TL_MF = 'TL-MF'
    TL_MT = 'TL-MT'
    TL_OE = 'TL-OE'
    TL_VI = 'TL-VI'
    TM_A = 'TM-A'
    TM_B = 'TM-B'
    TM_D = 'TM-D'
    TM_L = 'TM-L'
    TM_M = 'TM-M'
    TM_S = 'TM-S'
    TN_11 = 'TN-11'
    TN_12 = 'TN-12'
    TN_13 = 'TN-13'
    TN_14 = 'TN-14'
    TN_21 = 'TN-21'
    TN_22 = 'TN-22'
    TN_23 = 'TN-23'
    TN_31 = 'TN-31'
    TN_32 = 'TN-32'
    TN_33 = 'TN-33'
    TN_34 = 'TN-34'
    TN_41 = 'TN-41'
    TN_42 = 'TN-42'
    TN_43 = 'TN-43'
    TN_51 = 'TN-51'
    TN_52 = 'TN-52'
    TN_53 = 'TN-53'
    TN_61 = 'TN-61'
    TN_71 = 'TN-71'
    TN_72 = 'TN-72'
    TN_73 = 'TN-73'
    TN_81 = 'TN-81'
    TN_82 = 'TN-82'
    TN_83 = 'TN-83'
    TO_01 = 'TO-01'
    TO_02 = 'TO-02'
    TO_03 = 'TO-03'
    TO_04 = 'TO-04'
    TO_05 = 'TO-05'
    TR_01 = 'TR-01'
    TR_02 = 'TR-02'
    TR_03 = 'TR-03'
    TR_04 = 'TR-04'
    TR_05 = 'TR-05'
    TR_06 = 'TR-06'
    TR_07 = 'TR-07'
    TR_08 = 'TR-08'
    TR_09 = 'TR-09'
    TR_10 = 'TR-10'
    TR_11 = 'TR-11'
    TR_12 = 'TR-12'
    TR_13 = 'TR-13'
    TR_14 = 'TR-14'
    TR_15 = 'TR-15'
    TR_16 = 'TR-16'
    TR_17 = 'TR-17'
    TR_18 = 'TR-18'
    TR_19 = 'TR-19'
    TR_20 = 'TR-20'
    TR_21 = 'TR-21'
    TR_22 = 'TR-22'
    TR_23 = 'TR-23'
    TR_24 = 'TR-24'
    TR_25 = 'TR-25'
    TR_26 = 'TR-26'
    TR_27 = 'TR-27'
    TR_28 = 'TR-28'
    TR_29 = 'TR-29'
    TR_30 = 'TR-30'
    TR_31 = 'TR-31'
    TR_32 = 'TR-32'
    TR_33 = 'TR-33'
    TR_34 = 'TR-34'
    TR_35 = 'TR-35'
    TR_36 = 'TR-36'
    TR_37 = 'TR-37'
    TR_38 = 'TR-38'
    TR_39 = 'TR-39'
    TR_40 = 'TR-40'
    TR_41 = 'TR-41'
    TR_42 = 'TR-42'
    TR_43 = 'TR-43'
    TR_44 = 'TR-44'
    TR_45 = 'TR-45'
    TR_46 = 'TR-46'
    TR_47 = 'TR-47'
    TR_48 = 'TR-48'
    TR_49 = 'TR-49'
    TR_50 = 'TR-50'
    TR_51 = 'TR-51'
    TR_52 = 'TR-52'
    TR_53 = 'TR-53'
    TR_54 = 'TR-54'
    TR_55 = 'TR-55'
    TR_56 = 'TR-56'
    TR_57 = 'TR-57'
    TR_58 = 'TR-58'
    TR_59 = 'TR-59'
    TR_60 = 'TR-60'
    TR_61 = 'TR-61'
    TR_62 = 'TR-62'
    TR_63 = 'TR-63'
    TR_64 = 'TR-64'
    TR_65 = 'TR-65'
    TR_66 = 'TR-66'
    TR_67 = 'TR-67'
    TR_68 = 'TR-68'
    TR_69 = 'TR-69'
    TR_70 = 'TR-70'
    TR_71 = 'TR-71'
    TR_72 = 'TR-72'
    TR_73 = 'TR-73'
    TR_74 = 'TR-74'
    TR_75 = 'TR-75'
    TR_76 = 'TR-76'
    TR_77 = 'TR-77'
    TR_78 = 'TR-78'
    TR_79 = 'TR-79'
    TR_80 = 'TR-80'
    TR_81 = 'TR-81'
    TT_ARI = 'TT-ARI'
    TT_CHA = 'TT-CHA'
    TT_CTT = 'TT-CTT'
    TT_DMN = 'TT-DMN'
    TT_MRC = 'TT-MRC'
    TT_PED = 'TT-PED'
    TT_POS = 'TT-POS'
    TT_PRT = 'TT-PRT'
    TT_PTF = 'TT-PTF'
    TT_SFO = 'TT-SFO'
    TT_SGE = 'TT-SGE'
    TT_SIP = 'TT-SIP'
    TT_SJL = 'TT-SJL'
    TT_TOB = 'TT-TOB'
    TT_TUP = 'TT-TUP'
    TV_FUN = 'TV-FUN'
    TV_NIT = 'TV-NIT'
    TV_NKF = 'TV-NKF'
    TV_NKL = 'TV-NKL'
    TV_NMA = 'TV-NMA'
    TV_NMG = 'TV-NMG'
    TV_NUI = 'TV-NUI'
    TV_VAI = 'TV-VAI'
    TW_CHA = 'TW-CHA'
    TW_CYI = 'TW-CYI'
    TW_CYQ = 'TW-CYQ'
    TW_HSQ = 'TW-HSQ'
    TW_HSZ = 'TW-HSZ'
    TW_HUA = 'TW-HUA'
    TW_ILA = 'TW-ILA'
    TW_KEE = 'TW-KEE'
    TW_KHH = 'TW-KHH'
    TW_KIN = 'TW-KIN'
    TW_LIE = 'TW-LIE'
    TW_MIA = 'TW-MIA'
    TW_NAN = 'TW-NAN'
    TW_NWT = 'TW-NWT'
    TW_PEN = 'TW-PEN'
    TW_PIF = 'TW-PIF'
    TW_TAO = 'TW-TAO'
    TW_TNN = 'TW-TNN'
    TW_TPE = 'TW-TPE'
    TW_TTT = 'TW-TTT'
    TW_TXG = 'TW-TXG'
    TW_YUN = 'TW-YUN'
    TZ_01 = 'TZ-01'
    TZ_02 = 'TZ-02'
    TZ_03 = 'TZ-03'
    TZ_04 = 'TZ-04'
    TZ_05 = 'TZ-05'
    TZ_06 = 'TZ-06'
    TZ_07 = 'TZ-07'
    TZ_08 = 'TZ-08'
    TZ_09 = 'TZ-09'
    TZ_10 = 'TZ-10'
    TZ_11 = 'TZ-11'
    TZ_12 = 'TZ-12'
    TZ_13 = 'TZ-13'
    TZ_14 = 'TZ-14'
    TZ_15 = 'TZ-15'
    TZ_16 = 'TZ-16'
    TZ_17 = 'TZ-17'
    TZ_18 = 'TZ-18'
    TZ_19 = 'TZ-19'
    TZ_20 = 'TZ-20'
    TZ_21 = 'TZ-21'
    TZ_22 = 'TZ-22'
    TZ_23 = 'TZ-23'
    TZ_24 = 'TZ-24'
    TZ_25 = 'TZ-25'
    TZ_26 = 'TZ-26'
    TZ_27 = 'TZ-27'
    TZ_28 = 'TZ-28'
    TZ_29 = 'TZ-29'
    TZ_30 = 'TZ-30'
    TZ_31 = 'TZ-31'
    UA_05 = 'UA-05'
    UA_07 = 'UA-07'
    UA_09 = 'UA-09'
    UA_12 = 'UA-12'
    UA_14 = 'UA-14'
    UA_18 = 'UA-18'
    UA_21 = 'UA-21'
    UA_23 = 'UA-23'
    UA_26 = 'UA-26'
    UA_30 = 'UA-30'
    UA_32 = 'UA-32'
    UA_35 = 'UA-35'
    UA_40 = 'UA-40'
    UA_43 = 'UA-43'
    UA_46 = 'UA-46'
    UA_48 = 'UA-48'
    UA_51 = 'UA-51'
    UA_53 = 'UA-53'
    UA_56 = 'UA-56'
    UA_59 = 'UA-59'
    UA_61 = 'UA-61'
    UA_63 = 'UA-63'
    UA_65 = 'UA-65'
    UA_68 = 'UA-68'
    UA_71 = 'UA-71'
    UA_74 = 'UA-74'
    UA_77 = 'UA-77'
    UG_101 = 'UG-101'
    UG_102 = 'UG-102'
    UG_103 = 'UG-103'
    UG_104 = 'UG-104'
    UG_105 = 'UG-105'
    UG_106 = 'UG-106'
    UG_107 = 'UG-107'
    UG_108 = 'UG-108'
    UG_109 = 'UG-109'
    UG_110 = 'UG-110'
    UG_111 = 'UG-111'
    UG_112 = 'UG-112'
    UG_113 = 'UG-113'
    UG_114 = 'UG-114'
    UG_115 = 'UG-115'
    UG_116 = 'UG-116'
    UG_117 = 'UG-117'
    UG_118 = 'UG-118'
    UG_119 = 'UG-119'
    UG_120 = 'UG-120'
    UG_121 = 'UG-121'
    UG_122 = 'UG-122'
    UG_123 = 'UG-123'
    UG_124 = 'UG-124'
    UG_125 = 'UG-125'
    UG_126 = 'UG-126'
    UG_201 = 'UG-201'
    UG_202 = 'UG-202'
    UG_203 = 'UG-203'
    UG_204 = 'UG-204'
    UG_205 = 'UG-205'
    UG_206 = 'UG-206'
    UG_207 = 'UG-207'
    UG_208 = 'UG-208'
    UG_209 = 'UG-209'
    UG_210 = 'UG-210'
    UG_211 = 'UG-211'
    UG_212 = 'UG-212'
    UG_213 = 'UG-213'
    UG_214 = 'UG-214'
    UG_215 = 'UG-215'
    UG_216 = 'UG-216'
    UG_217 = 'UG-217'
    UG_218 = 'UG-218'
    UG_219 = 'UG-219'
    UG_220 = 'UG-220'
    UG_221 = 'UG-221'
    UG_222 = 'UG-222'
    UG_223 = 'UG-223'
    UG_224 = 'UG-224'
    UG_225 = 'UG-225'
    UG_226 = 'UG-226'
    UG_227 = 'UG-227'
    UG_228 = 'UG-228'
    UG_229 = 'UG-229'
    UG_230 = 'UG-230'
    UG_231 = 'UG-231'
    UG_232 = 'UG-232'
    UG_233 = 'UG-233'
    UG_234 = 'UG-234'
    UG_235 = 'UG-235'
    UG_236 = 'UG-236'
    UG_237 = 'UG-237'
    UG_301 = 'UG-301'
    UG_302 = 'UG-302'
    UG_303 = 'UG-303'
    UG_304 = 'UG-304'
    UG_305 = 'UG-305'
    UG_306 = 'UG-306'
    UG_307 = 'UG-307'
    UG_308 = 'UG-308'
    UG_309 = 'UG-309'
    UG_310 = 'UG-310'
    UG_311 = 'UG-311'
    UG_312 = 'UG-312'
    UG_313 = 'UG-313'
    UG_314 = 'UG-314'
    UG_315 = 'UG-315'
    UG_316 = 'UG-316'
    UG_317 = 'UG-317'
    UG_318 = 'UG-318'
    UG_319 = 'UG-319'
    UG_320 = 'UG-320'
    UG_321 = 'UG-321'
    UG_322 = 'UG-322'
    UG_323 = 'UG-323'
    UG_324 = 'UG-324'
    UG_325 = 'UG-325'
    UG_326 = 'UG-326'
    UG_327 = 'UG-327'
    UG_328 = 'UG-328'
    UG_329 = 'UG-329'
    UG_330 = 'UG-330'
    UG_331 = 'UG-331'
    UG_332 = 'UG-332'
    UG_333 = 'UG-333'
    UG_334 = 'UG-334'
    UG_335 = 'UG-335'
    UG_336 = 'UG-336'
    UG_337 = 'UG-337'
    UG_401 = 'UG-401'
    UG_402 = 'UG-402'
    UG_403 = 'UG-403'
    UG_404 = 'UG-404'
    UG_405 = 'UG-405'
    UG_406 = 'UG-406'
    UG_407 = 'UG-407'
    UG_408 = 'UG-408'
    UG_409 = 'UG-409'
    UG_410 = 'UG-410'
    UG_411 = 'UG-411'
    UG_412 = 'UG-412'
    UG_413 = 'UG-413'
    UG_414 = 'UG-414'
    UG_415 = 'UG-415'
    UG_416 = 'UG-416'
    UG_417 = 'UG-417'
    UG_418 = 'UG-418'
    UG_419 = 'UG-419'
    UG_420 = 'UG-420'
    UG_421 = 'UG-421'
    UG_422 = 'UG-422'
    UG_423 = 'UG-423'
    UG_424 = 'UG-424'
    UG_425 = 'UG-425'
    UG_426 = 'UG-426'
    UG_427 = 'UG-427'
    UG_428 = 'UG-428'
    UG_429 = 'UG-429'
    UG_430 = 'UG-430'
    UG_431 = 'UG-431'
    UG_432 = 'UG-432'
    UG_433 = 'UG-433'
    UG_434 = 'UG-434'
    UG_435 = 'UG-435'
    UG_C = 'UG-C'
    UG_E = 'UG-E'
    UG_N = 'UG-N'
    UG_W = 'UG-W'
    UM_67 = 'UM-67'
    UM_71 = 'UM-71'
    UM_76 = 'UM-76'
    UM_79 = 'UM-79'
    UM_81 = 'UM-81'
    UM_84 = 'UM-84'
    UM_86 = 'UM-86'
    UM_89 = 'UM-89'
    UM_95 = 'UM-95'
    US_AK = 'US-AK'
    US_AL = 'US-AL'
    US_AR = 'US-AR'
    US_AS = 'US-AS'
    US_AZ = 'US-AZ'
    US_CA = 'US-CA'
    US_CO = 'US-CO'
    US_CT = 'US-CT'
    US_DC = 'US-DC'
    US_DE = 'US-DE'
    US_FL = 'US-FL'
    US_GA = 'US-GA'
    US_GU = 'US-GU'
    US_HI = 'US-HI'
    US_IA = 'US-IA'
    US_ID = 'US-ID'
    US_IL = 'US-IL'
    US_IN = 'US-IN'
    US_KS = 'US-KS'
    US_KY = 'US-KY'
    US_LA = 'US-LA'
    US_MA = 'US-MA'
    US_MD = 'US-MD'
    US_ME = 'US-ME'
    US_MI = 'US-MI'
    US_MN = 'US-MN'
    US_MO = 'US-MO'
    US_MP = 'US-MP'
    US_MS = 'US-MS'
    US_MT = 'US-MT'
    US_NC = 'US-NC'
    US_ND = 'US-ND'
    US_NE = 'US-NE'
    US_NH = 'US-NH'
    US_NJ = 'US-NJ'
    US_NM = 'US-NM'
    US_NV = 'US-NV'
    US_NY = 'US-NY'
    US_OH = 'US-OH'
    US_OK = 'US-OK'
    US_OR = 'US-OR'
    US_PA = 'US-PA'
    US_PR = 'US-PR'
    US_RI = 'US-RI'
    US_SC = 'US-SC'
    US_SD = 'US-SD'
    US_TN = 'US-TN'
    US_TX = 'US-TX'
    US_UM = 'US-UM'
    US_UT = 'US-UT'
    US_VA = 'US-VA'
    US_VI = 'US-VI'
    US_VT = 'US-VT'
    US_WA = 'US-WA'
    US_WI = 'US-WI'
    US_WV = 'US-WV'
    US_WY = 'US-WY'
    UY_AR = 'UY-AR'
    UY_CA = 'UY-CA'
    UY_CL = 'UY-CL'
    UY_CO = 'UY-CO'
    UY_DU = 'UY-DU'
    UY_FD = 'UY-FD'
    UY_FS = 'UY-FS'
    UY_LA = 'UY-LA'
    UY_MA = 'UY-MA'
    UY_MO = 'UY-MO'
    UY_PA = 'UY-PA'
    UY_RN = 'UY-RN'
    UY_RO = 'UY-RO'
    UY_RV = 'UY-RV'
    UY_SA = 'UY-SA'
    UY_SJ = 'UY-SJ'
    UY_SO = 'UY-SO'
    UY_TA = 'UY-TA'
    UY_TT = 'UY-TT'
    UZ_AN = 'UZ-AN'
    UZ_BU = 'UZ-BU'
    UZ_FA = 'UZ-FA'
    UZ_JI = 'UZ-JI'
    UZ_NG = 'UZ-NG'
    UZ_NW = 'UZ-NW'
    UZ_QA = 'UZ-QA'
    UZ_QR = 'UZ-QR'
    UZ_SA = 'UZ-SA'
    UZ_SI = 'UZ-SI'
    UZ_SU = 'UZ-SU'
    UZ_TK = 'UZ-TK'
    UZ_TO = 'UZ-TO'
    UZ_XO = 'UZ-XO'
    VC_01 = 'VC-01'
    VC_02 = 'VC-02'
    VC_03 = 'VC-03'
    VC_04 = 'VC-04'
    VC_05 = 'VC-05'
    VC_06 = 'VC-06'
    VE_A = 'VE-A'
    VE_B = 'VE-B'
    VE_C = 'VE-C'
    VE_D = 'VE-D'
    VE_E = 'VE-E'
    VE_F = 'VE-F'
    VE_G = 'VE-G'
    VE_H = 'VE-H'
    VE_I = 'VE-I'
    VE_J = 'VE-J'
    VE_K = 'VE-K'
    VE_L = 'VE-L'
    VE_M = 'VE-M'
    VE_N = 'VE-N'
    VE_O = 'VE-O'
    VE_P = 'VE-P'
    VE_R = 'VE-R'
    VE_S = 'VE-S'
    VE_T = 'VE-T'
    VE_U = 'VE-U'
    VE_V = 'VE-V'
    VE_W = 'VE-W'
    VE_X = 'VE-X'
    VE_Y = 'VE-Y'
    VE_Z = 'VE-Z'
    VN_01 = 'VN-01'
    VN_02 = 'VN-02'
    VN_03 = 'VN-03'
    VN_04 = 'VN-04'
    VN_05 = 'VN-05'
    VN_06 = 'VN-06'
    VN_07 = 'VN-07'
    VN_09 = 'VN-09'
    VN_13 = 'VN-13'
    VN_14 = 'VN-14'
    VN_18 = 'VN-18'
    VN_20 = 'VN-20'
    VN_21 = 'VN-21'
    VN_22 = 'VN-22'
    VN_23 = 'VN-23'
    VN_24 = 'VN-24'
    VN_25 = 'VN-25'
    VN_26 = 'VN-26'
    VN_27 = 'VN-27'
    VN_28 = 'VN-28'
    VN_29 = 'VN-29'
    VN_30 = 'VN-30'
    VN_31 = 'VN-31'
    VN_32 = 'VN-32'
    VN_33 = 'VN-33'
    VN_34 = 'VN-34'
    VN_35 = 'VN-35'
    VN_36 = 'VN-36'
    VN_37 = 'VN-37'
    VN_39 = 'VN-39'
    VN_40 = 'VN-40'
    VN_41 = 'VN-41'
    VN_43 = 'VN-43'
    VN_44 = 'VN-44'
    VN_45 = 'VN-45'
    VN_46 = 'VN-46'
    VN_47 = 'VN-47'
    VN_49 = 'VN-49'
    VN_50 = 'VN-50'
    VN_51 = 'VN-51'
    VN_52 = 'VN-52'
    VN_53 = 'VN-53'
    VN_54 = 'VN-54'
    VN_55 = 'VN-55'
    VN_56 = 'VN-56'
    VN_57 = 'VN-57'
    VN_58 = 'VN-58'
    VN_59 = 'VN-59'
    VN_61 = 'VN-61'
    VN_63 = 'VN-63'
    VN_66 = 'VN-66'
    VN_67 = 'VN-67'
    VN_68 = 'VN-68'
    VN_69 = 'VN-69'
    VN_70 = 'VN-70'
    VN_71 = 'VN-71'
    VN_72 = 'VN-72'
    VN_73 = 'VN-73'
    VN_CT = 'VN-CT'
    VN_DN = 'VN-DN'
    VN_HN = 'VN-HN'
    VN_HP = 'VN-HP'
    VN_SG = 'VN-SG'
    VU_MAP = 'VU-MAP'
    VU_PAM = 'VU-PAM'
    VU_SAM = 'VU-SAM'
    VU_SEE = 'VU-SEE'
    VU_TAE = 'VU-TAE'
    VU_TOB = 'VU-TOB'
    WF_AL = 'WF-AL'
    WF_SG = 'WF-SG'
    WF_UV = 'WF-UV'
    WS_AA = 'WS-AA'
    WS_AL = 'WS-AL'
    WS_AT = 'WS-AT'
    WS_FA = 'WS-FA'
    WS_GE = 'WS-GE'
    WS_GI = 'WS-GI'
    WS_PA = 'WS-PA'
    WS_SA = 'WS-SA'
    WS_TU = 'WS-TU'
    WS_VF = 'WS-VF'
    WS_VS = 'WS-VS'
    YE_AB = 'YE-AB'
    YE_AD = 'YE-AD'
    YE_AM = 'YE-AM'
    YE_BA = 'YE-BA'
    YE_DA = 'YE-DA'
    YE_DH = 'YE-DH'
    YE_HD = 'YE-HD'
    YE_HJ = 'YE-HJ'
    YE_HU = 'YE-HU'
    YE_IB = 'YE-IB'
    YE_JA = 'YE-JA'
    YE_LA = 'YE-LA'
    YE_MA = 'YE-MA'
    YE_MR = 'YE-MR'
    YE_MW = 'YE-MW'
    YE_RA = 'YE-RA'
    YE_SA = 'YE-SA'
    YE_SD = 'YE-SD'
    YE_SH = 'YE-SH'
    YE_SN = 'YE-SN'
    YE_SU = 'YE-SU'
    YE_TA = 'YE-TA'
    ZA_EC = 'ZA-EC'
    ZA_FS = 'ZA-FS'
    ZA_GP = 'ZA-GP'
    ZA_KZN = 'ZA-KZN'
    ZA_LP = 'ZA-LP'
    ZA_MP = 'ZA-MP'
    ZA_NC = 'ZA-NC'
    ZA_NW = 'ZA-NW'
    ZA_WC = 'ZA-WC'
    ZM_01 = 'ZM-01'
    ZM_02 = 'ZM-02'
    ZM_03 = 'ZM-03'
    ZM_04 = 'ZM-04'
    ZM_05 = 'ZM-05'
    ZM_06 = 'ZM-06'
    ZM_07 = 'ZM-07'
    ZM_08 = 'ZM-08'
    ZM_09 = 'ZM-09'
    ZM_10 = 'ZM-10'
    ZW_BU = 'ZW-BU'
    ZW_HA = 'ZW-HA'
    ZW_MA = 'ZW-MA'
    ZW_MC = 'ZW-MC'
    ZW_ME = 'ZW-ME'
    ZW_MI = 'ZW-MI'
    ZW_MN = 'ZW-MN'
    ZW_MS = 'ZW-MS'
    ZW_MV = 'ZW-MV'
    ZW_MW = 'ZW-MW'


# (name, type, parent) for each Code member, indexed by Code.ordinal
TABLE = (
    ('Canillo', 'Parish', None),
    ('Encamp', 'Parish', None),
    ('La Massana', 'Parish', None),
    ('Ordino', 'Parish', None),
    ('Sant Julià de Lòria', 'Parish', None),
    ('Andorra la Vella', 'Parish', None),
    ('Escaldes-Engordany', 'Parish', None),
    ('‘Ajmān', 'Emirate', None),
    ('Abū Z̧aby', 'Emirate', None),
    ('Dubayy', 'Emirate', None),
    ('Al Fujayrah', 'Emirate', None),
    ('Ra’s al Khaymah', 'Emirate', None),
    ('Ash Shāriqah', 'Emirate', None),
    ('Umm al Qaywayn', 'Emirate', None),
    ('Balkh', 'Province', None),
    ('Bāmyān', 'Province', None),
    ('Bādghīs', 'Province', None),
    ('Badakhshān', 'Province', None),
    ('Baghlān', 'Province', None),
    ('Dāykundī', 'Province', None),
    ('Farāh', 'Province', None),
    ('Fāryāb', 'Province', None),
    ('Ghaznī', 'Province', None),
    ('Ghōr', 'Province', None),
    ('Helmand', 'Province', None),
    ('Herāt', 'Province', None),
    ('Jowzjān', 'Province', None),
    ('Kābul', 'Province', None),
    ('Kandahār', 'Province', None),
    ('Kāpīsā', 'Province', None),
    ('Kunduz', 'Province', None),
    ('Khōst', 'Province', None),
    ('Kunaṟ', 'Province', None),
    ('Laghmān', 'Province', None),
    ('Lōgar', 'Province', None),
    ('Nangarhār', 'Province', None),
    ('Nīmrōz', 'Province', None),
    ('Nūristān', 'Province', None),
    ('Panjshayr', 'Province', None),
    ('Parwān', 'Province', None),
    ('Paktiyā', 'Province', None),
    ('Paktīkā', 'Province', None),
    ('Samangān', 'Province', None),
    ('Sar-e Pul', 'Province', None),
    ('Takhār', 'Province', None),
    ('Uruzgān', 'Province', None),
    ('Wardak', 'Province', None),
    ('Zābul', 'Province', None),
    ('Saint George', 'Parish', None),
    ('Saint John', 'Parish', None),
    ('Saint Mary', 'Parish', None),
    ('Saint Paul', 'Parish', None),
    ('Saint Peter', 'Parish', None),
    ('Saint Philip', 'Parish', None),
    ('Barbuda', 'Dependency', None),
    ('Redonda', 'Dependency', None),
    ('Berat', 'County', None),
    ('Durrës', 'County', None),
    ('Elbasan', 'County', None),
    ('Fier', 'County', None),
    ('Gjirokastër', 'County', None),
    ('Korçë', 'County', None),
    ('Kukës', 'County', None),
    ('Lezhë', 'County', None),
    ('Dibër', 'County', None),
    ('Shkodër', 'County', None),
    ('Tiranë', 'County', None),
    ('Vlorë', 'County', None),
    ('Aragac̣otn', 'Region', None),
    ('Ararat', 'Region', None),
    ('Armavir', 'Region', None),
    ('Erevan', 'City', None),
    ("Geġark'unik'", 'Region', None),
    ("Kotayk'", 'Region', None),
    ('Loṙi', 'Region', None),
    ('Širak', 'Region', None),
    ("Syunik'", 'Region', None),
    ('Tavuš', 'Region', None),
    ('Vayoć Jor', 'Region', None),
    ('Bengo', 'Province', None),
    ('Benguela', 'Province', None),
    ('Bié', 'Province', None),
    ('Cabinda', 'Province', None),
    ('Cuando Cubango', 'Province', None),
    ('Cunene', 'Province', None),
    ('Cuanza-Norte', 'Province', None),
    ('Cuanza-Sul', 'Province', None),
    ('Huambo', 'Province', None),
    ('Huíla', 'Province', None),
    ('Lunda-Norte', 'Province', None),
    ('Lunda-Sul', 'Province', None),
    ('Luanda', 'Province', None),
    ('Malange', 'Province', None),
    ('Moxico', 'Province', None),
    ('Namibe', 'Province', None),
    ('Uíge', 'Province', None),
    ('Zaire', 'Province', None),
    ('Salta', 'Province', None),
    ('Buenos Aires', 'Province', None),
    ('Ciudad Autónoma de Buenos Aires', 'City', None),
    ('San Luis', 'Province', None),
    ('Entre Ríos', 'Province', None),
    ('La Rioja', 'Province', None),
    ('Santiago del Estero', 'Province', None),
    ('Chaco', 'Province', None),
    ('San Juan', 'Province', None),
    ('Catamarca', 'Province', None),
    ('La Pampa', 'Province', None),
    ('Mendoza', 'Province', None),
    ('Misiones', 'Province', None),
    ('Formosa', 'Province', None),
    ('Neuquén', 'Province', None),
    ('Río Negro', 'Province', None),
    ('Santa Fe', 'Province', None),
    ('Tucumán', 'Province', None),
    ('Chubut', 'Province', None),
    ('Tierra del Fuego', 'Province', None),
    ('Corrientes', 'Province', None),
    ('Córdoba', 'Province', None),
    ('Jujuy', 'Province', None),
    ('Santa Cruz', 'Province', None),
    ('Burgenland', 'State', None),
    ('Kärnten', 'State', None),
    ('Niederösterreich', 'State', None),
    ('Oberösterreich', 'State', None),
    ('Salzburg', 'State', None),
    ('Steiermark', 'State', None),
    ('Tirol', 'State', None),
    ('Vorarlberg', 'State', None),
    ('Wien', 'State', None),
    ('Australian Capital Territory', 'Territory', None),
    ('New South Wales', 'State', None),
    ('Northern Territory', 'Territory', None),
    ('Queensland', 'State', None),
    ('South Australia', 'State', None),
    ('Tasmania', 'State', None),
    ('Victoria', 'State', None),
    ('Western Australia', 'State', None),
    ('Abşeron', 'Rayon', None),
    ('Ağstafa', 'Rayon', None),
    ('Ağcabədi', 'Rayon', None),
    ('Ağdam', 'Rayon', None),
    ('Ağdaş', 'Rayon', None),
    ('Ağsu', 'Rayon', None),
    ('Astara', 'Rayon', None),
    ('Bakı', 'Municipality', None),
    ('Babək', 'Rayon', 'AZ-NX'),
    ('Balakən', 'Rayon', None),
    ('Bərdə', 'Rayon', None),
    ('Beyləqan', 'Rayon', None),
    ('Biləsuvar', 'Rayon', None),
    ('Cəbrayıl', 'Rayon', None),
    ('Cəlilabad', 'Rayon', None),
    ('Culfa', 'Rayon', 'AZ-NX'),
    ('Daşkəsən', 'Rayon', None),
    ('Füzuli', 'Rayon', None),
    ('Gəncə', 'Municipality', None),
    ('Gədəbəy', 'Rayon', None),
    ('Goranboy', 'Rayon', None),
    ('Göyçay', 'Rayon', None),
    ('Göygöl', 'Rayon', None),
    ('Hacıqabul', 'Rayon', None),
    ('İmişli', 'Rayon', None),
    ('İsmayıllı', 'Rayon', None),
    ('Kəlbəcər', 'Rayon', None),
    ('Kǝngǝrli', 'Rayon', 'AZ-NX'),
    ('Kürdəmir', 'Rayon', None),
    ('Lənkəran', 'Municipality', None),
    ('Laçın', 'Rayon', None),
    ('Lənkəran', 'Rayon', None),
    ('Lerik', 'Rayon', None),
    ('Masallı', 'Rayon', None),
    ('Mingəçevir', 'Municipality', None),
    ('Naftalan', 'Municipality', None),
    ('Neftçala', 'Rayon', None),
    ('Naxçıvan', 'Municipality', 'AZ-NX'),
    ('Naxçıvan', 'Autonomous republic', None),
    ('Oğuz', 'Rayon', None),
    ('Ordubad', 'Rayon', 'AZ-NX'),
    ('Qəbələ', 'Rayon', None),
    ('Qax', 'Rayon', None),
    ('Qazax', 'Rayon', None),
    ('Quba', 'Rayon', None),
    ('Qubadlı', 'Rayon', None),
    ('Qobustan', 'Rayon', None),
    ('Qusar', 'Rayon', None),
    ('Şəki', 'Municipality', None),
    ('Sabirabad', 'Rayon', None),
    ('Sədərək', 'Rayon', 'AZ-NX'),
    ('Şahbuz', 'Rayon', 'AZ-NX'),
    ('Şəki', 'Rayon', None),
    ('Salyan', 'Rayon', None),
    ('Şərur', 'Rayon', 'AZ-NX'),
    ('Saatlı', 'Rayon', None),
    ('Şabran', 'Rayon', None),
    ('Siyəzən', 'Rayon', None),
    ('Şəmkir', 'Rayon', None),
    ('Sumqayıt', 'Municipality', None),
    ('Şamaxı', 'Rayon', None),
    ('Samux', 'Rayon', None),
    ('Şirvan', 'Municipality', None),
    ('Şuşa', 'Rayon', None),
    ('Tərtər', 'Rayon', None),
    ('Tovuz', 'Rayon', None),
    ('Ucar', 'Rayon', None),
    ('Xankəndi', 'Municipality', None),
    ('Xaçmaz', 'Rayon', None),
    ('Xocalı', 'Rayon', None),
    ('Xızı', 'Rayon', None),
    ('Xocavənd', 'Rayon', None),
    ('Yardımlı', 'Rayon', None),
    ('Yevlax', 'Municipality', None),
    ('Yevlax', 'Rayon', None),
    ('Zəngilan', 'Rayon', None),
    ('Zaqatala', 'Rayon', None),
    ('Zərdab', 'Rayon', None),
    ('Federacija Bosne i Hercegovine', 'Entity', None),
    ('Brčko distrikt', 'District with special status', None),
    ('Republika Srpska', 'Entity', None),
    ('Christ Church', 'Parish', None),
    ('Saint Andrew', 'Parish', None),
    ('Saint George', 'Parish', None),
    ('Saint James', 'Parish', None),
    ('Saint John', 'Parish', None),
    ('Saint Joseph', 'Parish', None),
    ('Saint Lucy', 'Parish', None),
    ('Saint Michael', 'Parish', None),
    ('Saint Peter', 'Parish', None),
    ('Saint Philip', 'Parish', None),
    ('Saint Thomas', 'Parish', None),
    ('Bandarban', 'District', 'BD-B'),
    ('Barguna', 'District', 'BD-A'),
    ('Bogura', 'District', 'BD-E'),
    ('Brahmanbaria', 'District', 'BD-B'),
    ('Bagerhat', 'District', 'BD-D'),
    ('Barishal', 'District', 'BD-A'),
    ('Bhola', 'District', 'BD-A'),
    ('Cumilla', 'District', 'BD-B'),
    ('Chandpur', 'District', 'BD-B'),
    ('Chattogram', 'District', 'BD-B'),
    ("Cox's Bazar", 'District', 'BD-B'),
    ('Chuadanga', 'District', 'BD-D'),
    ('Dhaka', 'District', 'BD-C'),
    ('Dinajpur', 'District', 'BD-F'),
    ('Faridpur', 'District', 'BD-C'),
    ('Feni', 'District', 'BD-B'),
    ('Gopalganj', 'District', 'BD-C'),
    ('Gazipur', 'District', 'BD-C'),
    ('Gaibandha', 'District', 'BD-F'),
    ('Habiganj', 'District', 'BD-G'),
    ('Jamalpur', 'District', 'BD-H'),
    ('Jashore', 'District', 'BD-D'),
    ('Jhenaidah', 'District', 'BD-D'),
    ('Joypurhat', 'District', 'BD-E'),
    ('Jhalakathi', 'District', 'BD-A'),
    ('Kishoreganj', 'District', 'BD-C'),
    ('Khulna', 'District', 'BD-D'),
    ('Kurigram', 'District', 'BD-F'),
    ('Khagrachhari', 'District', 'BD-B'),
    ('Kushtia', 'District', 'BD-D'),
    ('Lakshmipur', 'District', 'BD-B'),
    ('Lalmonirhat', 'District', 'BD-F'),
    ('Manikganj', 'District', 'BD-C'),
    ('Mymensingh', 'District', 'BD-H'),
    ('Munshiganj', 'District', 'BD-C'),
    ('Madaripur', 'District', 'BD-C'),
    ('Magura', 'District', 'BD-D'),
    ('Moulvibazar', 'District', 'BD-G'),
    ('Meherpur', 'District', 'BD-D'),
    ('Narayanganj', 'District', 'BD-C'),
    ('Netrakona', 'District', 'BD-H'),
    ('Narsingdi', 'District', 'BD-C'),
    ('Narail', 'District', 'BD-D'),
    ('Natore', 'District', 'BD-E'),
    ('Chapai Nawabganj', 'District', 'BD-E'),
    ('Nilphamari', 'District', 'BD-F'),
    ('Noakhali', 'District', 'BD-B'),
    ('Naogaon', 'District', 'BD-E'),
    ('Pabna', 'District', 'BD-E'),
    ('Pirojpur', 'District', 'BD-A'),
    ('Patuakhali', 'District', 'BD-A'),
    ('Panchagarh', 'District', 'BD-F'),
    ('Rajbari', 'District', 'BD-C'),
    ('Rajshahi', 'District', 'BD-E'),
    ('Rangpur', 'District', 'BD-F'),
    ('Rangamati', 'District', 'BD-B'),
    ('Sherpur', 'District', 'BD-H'),
    ('Satkhira', 'District', 'BD-D'),
    ('Sirajganj', 'District', 'BD-E'),
    ('Sylhet', 'District', 'BD-G'),
    ('Sunamganj', 'District', 'BD-G'),
    ('Shariatpur', 'District', 'BD-C'),
    ('Tangail', 'District', 'BD-C'),
    ('Thakurgaon', 'District', 'BD-F'),
    ('Barishal', 'Division', None),
    ('Chattogram', 'Division', None),
    ('Dhaka', 'Division', None),
    ('Khulna', 'Division', None),
    ('Rajshahi', 'Division', None),
    ('Rangpur', 'Division', None),
    ('Sylhet', 'Division', None),
    ('Mymensingh', 'Division', None),
    ('Brussels Hoofdstedelijk Gewest', 'Region', None),
    ('Antwerpen', 'Province', 'BE-VLG'),
    ('Vlaams-Brabant', 'Province', 'BE-VLG'),
    ('Vlaams Gewest', 'Region', None),
    ('Limburg', 'Province', 'BE-VLG'),
    ('Oost-Vlaanderen', 'Province', 'BE-VLG'),
    ('West-Vlaanderen', 'Province', 'BE-VLG'),
    ('wallonne, Région', 'Region', None),
    ('Brabant wallon', 'Province', 'BE-WAL'),
    ('Hainaut', 'Province', 'BE-WAL'),
    ('Liège', 'Province', 'BE-WAL'),
    ('Luxembourg', 'Province', 'BE-WAL'),
    ('Namur', 'Province', 'BE-WAL'),
    ('Boucle du Mouhoun', 'Region', None),
    ('Cascades', 'Region', None),
    ('Centre', 'Region', None),
    ('Centre-Est', 'Region', None),
    ('Centre-Nord', 'Region', None),
    ('Centre-Ouest', 'Region', None),
    ('Centre-Sud', 'Region', None),
    ('Est', 'Region', None),
    ('Hauts-Bassins', 'Region', None),
    ('Nord', 'Region', None),
    ('Plateau-Central', 'Region', None),
    ('Sahel', 'Region', None),
    ('Sud-Ouest', 'Region', None),
    ('Balé', 'Province', 'BF-01'),
    ('Bam', 'Province', 'BF-05'),
    ('Banwa', 'Province', 'BF-01'),
    ('Bazèga', 'Province', 'BF-07'),
    ('Bougouriba', 'Province', 'BF-13'),
    ('Boulgou', 'Province', 'BF-04'),
    ('Boulkiemdé', 'Province', 'BF-06'),
    ('Comoé', 'Province', 'BF-02'),
    ('Ganzourgou', 'Province', 'BF-11'),
    ('Gnagna', 'Province', 'BF-08'),
    ('Gourma', 'Province', 'BF-08'),
    ('Houet', 'Province', 'BF-09'),
    ('Ioba', 'Province', 'BF-13'),
    ('Kadiogo', 'Province', 'BF-03'),
    ('Kénédougou', 'Province', 'BF-09'),
    ('Komondjari', 'Province', 'BF-08'),
    ('Kompienga', 'Province', 'BF-08'),
    ('Koulpélogo', 'Province', 'BF-04'),
    ('Kossi', 'Province', 'BF-01'),
    ('Kouritenga', 'Province', 'BF-04'),
    ('Kourwéogo', 'Province', 'BF-11'),
    ('Léraba', 'Province', 'BF-02'),
    ('Loroum', 'Province', 'BF-10'),
    ('Mouhoun', 'Province', 'BF-01'),
    ('Namentenga', 'Province', 'BF-05'),
    ('Nahouri', 'Province', 'BF-07'),
    ('Nayala', 'Province', 'BF-01'),
    ('Noumbiel', 'Province', 'BF-13'),
    ('Oubritenga', 'Province', 'BF-11'),
    ('Oudalan', 'Province', 'BF-12'),
    ('Passoré', 'Province', 'BF-10'),
    ('Poni', 'Province', 'BF-13'),
    ('Séno', 'Province', 'BF-12'),
    ('Sissili', 'Province', 'BF-06'),
    ('Sanmatenga', 'Province', 'BF-05'),
    ('Sanguié', 'Province', 'BF-06'),
    ('Soum', 'Province', 'BF-12'),
    ('Sourou', 'Province', 'BF-01'),
    ('Tapoa', 'Province', 'BF-08'),
    ('Tuy', 'Province', 'BF-09'),
    ('Yagha', 'Province', 'BF-12'),
    ('Yatenga', 'Province', 'BF-10'),
    ('Ziro', 'Province', 'BF-06'),
    ('Zondoma', 'Province', 'BF-10'),
    ('Zoundwéogo', 'Province', 'BF-07'),
    ('Blagoevgrad', 'District', None),
    ('Burgas', 'District', None),
    ('Varna', 'District', None),
    ('Veliko Tarnovo', 'District', None),
    ('Vidin', 'District', None),
    ('Vratsa', 'District', None),
    ('Gabrovo', 'District', None),
    ('Dobrich', 'District', None),
    ('Kardzhali', 'District', None),
    ('Kyustendil', 'District', None),
    ('Lovech', 'District', None),
    ('Montana', 'District', None),
    ('Pazardzhik', 'District', None),
    ('Pernik', 'District', None),
    ('Pleven', 'District', None),
    ('Plovdiv', 'District', None),
    ('Razgrad', 'District', None),
    ('Ruse', 'District', None),
    ('Silistra', 'District', None),
    ('Sliven', 'District', None),
    ('Smolyan', 'District', None),
    ('Sofia (stolitsa)', 'District', None),
    ('Sofia', 'District', None),
    ('Stara Zagora', 'District', None),
    ('Targovishte', 'District', None),
    ('Haskovo', 'District', None),
    ('Shumen', 'District', None),
    ('Yambol', 'District', None),
    ('Al ‘Āşimah', 'Governorate', None),
    ('Al Janūbīyah', 'Governorate', None),
    ('Al Muḩarraq', 'Governorate', None),
    ('Ash Shamālīyah', 'Governorate', None),
    ('Bubanza', 'Province', None),
    ('Bujumbura Rural', 'Province', None),
    ('Bujumbura Mairie', 'Province', None),
    ('Bururi', 'Province', None),
    ('Cankuzo', 'Province', None),
    ('Cibitoke', 'Province', None),
    ('Gitega', 'Province', None),
    ('Kirundo', 'Province', None),
    ('Karuzi', 'Province', None),
    ('Kayanza', 'Province', None),
    ('Makamba', 'Province', None),
    ('Muramvya', 'Province', None),
    ('Mwaro', 'Province', None),
    ('Muyinga', 'Province', None),
    ('Ngozi', 'Province', None),
    ('Rumonge', 'Province', None),
    ('Rutana', 'Province', None),
    ('Ruyigi', 'Province', None),
    ('Atacora', 'Department', None),
    ('Alibori', 'Department', None),
    ('Atlantique', 'Department', None),
    ('Borgou', 'Department', None),
    ('Collines', 'Department', None),
    ('Donga', 'Department', None),
    ('Couffo', 'Department', None),
    ('Littoral', 'Department', None),
    ('Mono', 'Department', None),
    ('Ouémé', 'Department', None),
    ('Plateau', 'Department', None),
    ('Zou', 'Department', None),
    ('Belait', 'District', None),
    ('Brunei-Muara', 'District', None),
    ('Temburong', 'District', None),
    ('Tutong', 'District', None),
    ('El Beni', 'Department', None),
    ('Cochabamba', 'Department', None),
    ('Chuquisaca', 'Department', None),
    ('La Paz', 'Department', None),
    ('Pando', 'Department', None),
    ('Oruro', 'Department', None),
    ('Potosí', 'Department', None),
    ('Santa Cruz', 'Department', None),
    ('Tarija', 'Department', None),
    ('Bonaire', 'Special municipality', None),
    ('Saba', 'Special municipality', None),
    ('Sint Eustatius', 'Special municipality', None),
    ('Acre', 'State', None),
    ('Alagoas', 'State', None),
    ('Amazonas', 'State', None),
    ('Amapá', 'State', None),
    ('Bahia', 'State', None),
    ('Ceará', 'State', None),
    ('Distrito Federal', 'Federal district', None),
    ('Espírito Santo', 'State', None),
    ('Goiás', 'State', None),
    ('Maranhão', 'State', None),
    ('Minas Gerais', 'State', None),
    ('Mato Grosso do Sul', 'State', None),
    ('Mato Grosso', 'State', None),
    ('Pará', 'State', None),
    ('Paraíba', 'State', None),
    ('Pernambuco', 'State', None),
    ('Piauí', 'State', None),
    ('Paraná', 'State', None),
    ('Rio de Janeiro', 'State', None),
    ('Rio Grande do Norte', 'State', None),
    ('Rondônia', 'State', None),
    ('Roraima', 'State', None),
    ('Rio Grande do Sul', 'State', None),
    ('Santa Catarina', 'State', None),
    ('Sergipe', 'State', None),
    ('São Paulo', 'State', None),
    ('Tocantins', 'State', None),
    ('Acklins', 'District', None),
    ('Bimini', 'District', None),
    ('Black Point', 'District', None),
    ('Berry Islands', 'District', None),
    ('Central Eleuthera', 'District', None),
    ('Cat Island', 'District', None),
    ('Crooked Island and Long Cay', 'District', None),
    ('Central Abaco', 'District', None),
    ('Central Andros', 'District', None),
    ('East Grand Bahama', 'District', None),
    ('Exuma', 'District', None),
    ('City of Freeport', 'District', None),
    ('Grand Cay', 'District', None),
    ('Harbour Island', 'District', None),
    ('Hope Town', 'District', None),
    ('Inagua', 'District', None),
    ('Long Island', 'District', None),
    ('Mangrove Cay', 'District', None),
    ('Mayaguana', 'District', None),
    ("Moore's Island", 'District', None),
    ('North Eleuthera', 'District', None),
    ('North Abaco', 'District', None),
    ('New Providence', 'Island', None),
    ('North Andros', 'District', None),
    ('Rum Cay', 'District', None),
    ('Ragged Island', 'District', None),
    ('South Andros', 'District', None),
    ('South Eleuthera', 'District', None),
    ('South Abaco', 'District', None),
    ('San Salvador', 'District', None),
    ('Spanish Wells', 'District', None),
    ('West Grand Bahama', 'District', None),
    ('Paro', 'District', None),
    ('Chhukha', 'District', None),
    ('Haa', 'District', None),
    ('Samtse', 'District', None),
    ('Thimphu', 'District', None),
    ('Tsirang', 'District', None),
    ('Dagana', 'District', None),
    ('Punakha', 'District', None),
    ('Wangdue Phodrang', 'District', None),
    ('Sarpang', 'District', None),
    ('Trongsa', 'District', None),
    ('Bumthang', 'District', None),
    ('Zhemgang', 'District', None),
    ('Trashigang', 'District', None),
    ('Monggar', 'District', None),
    ('Pema Gatshel', 'District', None),
    ('Lhuentse', 'District', None),
    ('Samdrup Jongkhar', 'District', None),
    ('Gasa', 'District', None),
    ('Trashi Yangtse', 'District', None),
    ('Central', 'District', None),
    ('Chobe', 'District', None),
    ('Francistown', 'City', None),
    ('Gaborone', 'City', None),
    ('Ghanzi', 'District', None),
    ('Jwaneng', 'Town', None),
    ('Kgalagadi', 'District', None),
    ('Kgatleng', 'District', None),
    ('Kweneng', 'District', None),
    ('Lobatse', 'Town', None),
    ('North East', 'District', None),
    ('North West', 'District', None),
    ('South East', 'District', None),
    ('Southern', 'District', None),
    ('Selibe Phikwe', 'Town', None),
    ('Sowa Town', 'Town', None),
    ('Bresckaja voblasć', 'Oblast', None),
    ('Gorod Minsk', 'City', None),
    ("Gomel'skaja oblast'", 'Oblast', None),
    ("Grodnenskaja oblast'", 'Oblast', None),
    ('Mahilioŭskaja voblasć', 'Oblast', None),
    ("Minskaja oblast'", 'Oblast', None),
    ('Viciebskaja voblasć', 'Oblast', None),
    ('Belize', 'District', None),
    ('Cayo', 'District', None),
    ('Corozal', 'District', None),
    ('Orange Walk', 'District', None),
    ('Stann Creek', 'District', None),
    ('Toledo', 'District', None),
    ('Alberta', 'Province', None),
    ('British Columbia', 'Province', None),
    ('Manitoba', 'Province', None),
    ('New Brunswick', 'Province', None),
    ('Newfoundland and Labrador', 'Province', None),
    ('Nova Scotia', 'Province', None),
    ('Northwest Territories', 'Territory', None),
    ('Nunavut', 'Territory', None),
    ('Ontario', 'Province', None),
    ('Prince Edward Island', 'Province', None),
    ('Quebec', 'Province', None),
    ('Saskatchewan', 'Province', None),
    ('Yukon', 'Territory', None),
    ('Kongo Central', 'Province', None),
    ('Bas-Uélé', 'Province', None),
    ('Équateur', 'Province', None),
    ('Haut-Katanga', 'Province', None),
    ('Haut-Lomami', 'Province', None),
    ('Haut-Uélé', 'Province', None),
    ('Ituri', 'Province', None),
    ('Kasaï Central', 'Province', None),
    ('Kasaï Oriental', 'Province', None),
    ('Kwango', 'Province', None),
    ('Kwilu', 'Province', None),
    ('Kinshasa', 'City', None),
    ('Kasaï', 'Province', None),
    ('Lomami', 'Province', None),
    ('Lualaba', 'Province', None),
    ('Maniema', 'Province', None),
    ('Mai-Ndombe', 'Province', None),
    ('Mongala', 'Province', None),
    ('Nord-Kivu', 'Province', None),
    ('Nord-Ubangi', 'Province', None),
    ('Sankuru', 'Province', None),
    ('Sud-Kivu', 'Province', None),
    ('Sud-Ubangi', 'Province', None),
    ('Tanganyika', 'Province', None),
    ('Tshopo', 'Province', None),
    ('Tshuapa', 'Province', None),
    ('Ouham', 'Prefecture', None),
    ('Bamingui-Bangoran', 'Prefecture', None),
    ('Bangui', 'Commune', None),
    ('Basse-Kotto', 'Prefecture', None),
    ('Haute-Kotto', 'Prefecture', None),
    ('Haut-Mbomou', 'Prefecture', None),
    ('Haute-Sangha / Mambéré-Kadéï', 'Prefecture', None),
    ('Gribingui', 'Economic prefecture', None),
    ('Kemö-Gïrïbïngï', 'Prefecture', None),
    ('Lobaye', 'Prefecture', None),
    ('Mbomou', 'Prefecture', None),
    ('Ombella-Mpoko', 'Prefecture', None),
    ('Nana-Mambéré', 'Prefecture', None),
    ('Ouham-Pendé', 'Prefecture', None),
    ('Sangha', 'Economic prefecture', None),
    ('Ouaka', 'Prefecture', None),
    ('Vakaga', 'Prefecture', None),
    ('Bouenza', 'Department', None),
    ('Pool', 'Department', None),
    ('Sangha', 'Department', None),
    ('Plateaux', 'Department', None),
    ('Cuvette-Ouest', 'Department', None),
    ('Pointe-Noire', 'Department', None),
    ('Lékoumou', 'Department', None),
    ('Kouilou', 'Department', None),
    ('Likouala', 'Department', None),
    ('Cuvette', 'Department', None),
    ('Niari', 'Department', None),
    ('Brazzaville', 'Department', None),
    ('Aargau', 'Canton', None),
    ('Appenzell Innerrhoden', 'Canton', None),
    ('Appenzell Ausserrhoden', 'Canton', None),
    ('Bern', 'Canton', None),
    ('Basel-Landschaft', 'Canton', None),
    ('Basel-Stadt', 'Canton', None),
    ('Freiburg', 'Canton', None),
    ('Genève', 'Canton', None),
    ('Glarus', 'Canton', None),
    ('Graubünden', 'Canton', None),
    ('Jura', 'Canton', None),
    ('Luzern', 'Canton', None),
    ('Neuchâtel', 'Canton', None),
    ('Nidwalden', 'Canton', None),
    ('Obwalden', 'Canton', None),
    ('Sankt Gallen', 'Canton', None),
    ('Schaffhausen', 'Canton', None),
    ('Solothurn', 'Canton', None),
    ('Schwyz', 'Canton', None),
    ('Thurgau', 'Canton', None),
    ('Ticino', 'Canton', None),
    ('Uri', 'Canton', None),
    ('Vaud', 'Canton', None),
    ('Valais', 'Canton', None),
    ('Zug', 'Canton', None),
    ('Zürich', 'Canton', None),
    ('Abidjan', 'Autonomous district', None),
    ('Bas-Sassandra', 'District', None),
    ('Comoé', 'District', None),
    ('Denguélé', 'District', None),
    ('Gôh-Djiboua', 'District', None),
    ('Lacs', 'District', None),
    ('Lagunes', 'District', None),
    ('Montagnes', 'District', None),
    ('Sassandra-Marahoué', 'District', None),
    ('Savanes', 'District', None),
    ('Vallée du Bandama', 'District', None),
    ('Woroba', 'District', None),
    ('Yamoussoukro', 'Autonomous district', None),
    ('Zanzan', 'District', None),
    ('Aisén del General Carlos Ibañez del Campo', 'Region', None),
    ('Antofagasta', 'Region', None),
    ('Arica y Parinacota', 'Region', None),
    ('La Araucanía', 'Region', None),
    ('Atacama', 'Region', None),
    ('Biobío', 'Region', None),
    ('Coquimbo', 'Region', None),
    ("Libertador General Bernardo O'Higgins", 'Region', None),
    ('Los Lagos', 'Region', None),
    ('Los Ríos', 'Region', None),
    ('Magallanes', 'Region', None),
    ('Maule', 'Region', None),
    ('Ñuble', 'Region', None),
    ('Región Metropolitana de Santiago', 'Region', None),
    ('Tarapacá', 'Region', None),
    ('Valparaíso', 'Region', None),
    ('Adamaoua', 'Region', None),
    ('Centre', 'Region', None),
    ('Far North', 'Region', None),
    ('East', 'Region', None),
    ('Littoral', 'Region', None),
    ('North', 'Region', None),
    ('North-West', 'Region', None),
    ('West', 'Region', None),
    ('South', 'Region', None),
    ('South-West', 'Region', None),
    ('Anhui Sheng', 'Province', None),
    ('Beijing Shi', 'Municipality', None),
    ('Chongqing Shi', 'Municipality', None),
    ('Fujian Sheng', 'Province', None),
    ('Guangdong Sheng', 'Province', None),
    ('Gansu Sheng', 'Province', None),
    ('Guangxi Zhuangzu Zizhiqu', 'Autonomous region', None),
    ('Guizhou Sheng', 'Province', None),
    ('Henan Sheng', 'Province', None),
    ('Hubei Sheng', 'Province', None),
    ('Hebei Sheng', 'Province', None),
    ('Hainan Sheng', 'Province', None),
    ('Hong Kong SAR', 'Special administrative region', None),
    ('Heilongjiang Sheng', 'Province', None),
    ('Hunan Sheng', 'Province', None),
    ('Jilin Sheng', 'Province', None),
    ('Jiangsu Sheng', 'Province', None),
    ('Jiangxi Sheng', 'Province', None),
    ('Liaoning Sheng', 'Province', None),
    ('Macao SAR', 'Special administrative region', None),
    ('Nei Mongol Zizhiqu', 'Autonomous region', None),
    ('Ningxia Huizi Zizhiqu', 'Autonomous region', None),
    ('Qinghai Sheng', 'Province', None),
    ('Sichuan Sheng', 'Province', None),
    ('Shandong Sheng', 'Province', None),
    ('Shanghai Shi', 'Municipality', None),
    ('Shaanxi Sheng', 'Province', None),
    ('Shanxi Sheng', 'Province', None),
    ('Tianjin Shi', 'Municipality', None),
    ('Taiwan Sheng', 'Province', None),
    ('Xinjiang Uygur Zizhiqu', 'Autonomous region', None),
    ('Xizang Zizhiqu', 'Autonomous region', None),
    ('Yunnan Sheng', 'Province', None),
    ('Zhejiang Sheng', 'Province', None),
    ('Amazonas', 'Department', None),
    ('Antioquia', 'Department', None),
    ('Arauca', 'Department', None),
    ('Atlántico', 'Department', None),
    ('Bolívar', 'Department', None),
    ('Boyacá', 'Department', None),
    ('Caldas', 'Department', None),
    ('Caquetá', 'Department', None),
    ('Casanare', 'Department', None),
    ('Cauca', 'Department', None),
    ('Cesar', 'Department', None),
    ('Chocó', 'Department', None),
    ('Córdoba', 'Department', None),
    ('Cundinamarca', 'Department', None),
    ('Distrito Capital de Bogotá', 'Capital district', None),
    ('Guainía', 'Department', None),
    ('Guaviare', 'Department', None),
    ('Huila', 'Department', None),
    ('La Guajira', 'Department', None),
    ('Magdalena', 'Department', None),
    ('Meta', 'Department', None),
    ('Nariño', 'Department', None),
    ('Norte de Santander', 'Department', None),
    ('Putumayo', 'Department', None),
    ('Quindío', 'Department', None),
    ('Risaralda', 'Department', None),
    ('Santander', 'Department', None),
    ('San Andrés, Providencia y Santa Catalina', 'Department', None),
    ('Sucre', 'Department', None),
    ('Tolima', 'Department', None),
    ('Valle del Cauca', 'Department', None),
    ('Vaupés', 'Department', None),
    ('Vichada', 'Department', None),
    ('Alajuela', 'Province', None),
    ('Cartago', 'Province', None),
    ('Guanacaste', 'Province', None),
    ('Heredia', 'Province', None),
    ('Limón', 'Province', None),
    ('Puntarenas', 'Province', None),
    ('San José', 'Province', None),
    ('Pinar del Río', 'Province', None),
    ('La Habana', 'Province', None),
    ('Matanzas', 'Province', None),
    ('Villa Clara', 'Province', None),
    ('Cienfuegos', 'Province', None),
    ('Sancti Spíritus', 'Province', None),
    ('Ciego de Ávila', 'Province', None),
    ('Camagüey', 'Province', None),
    ('Las Tunas', 'Province', None),
    ('Holguín', 'Province', None),
    ('Granma', 'Province', None),
    ('Santiago de Cuba', 'Province', None),
    ('Guantánamo', 'Province', None),
    ('Artemisa', 'Province', None),
    ('Mayabeque', 'Province', None),
    ('Isla de la Juventud', 'Special municipality', None),
    ('Ilhas de Barlavento', 'Geographical region', None),
    ('Brava', 'Municipality', 'CV-S'),
    ('Boa Vista', 'Municipality', 'CV-B'),
    ('Santa Catarina', 'Municipality', 'CV-S'),
    ('Santa Catarina do Fogo', 'Municipality', 'CV-S'),
    ('Santa Cruz', 'Municipality', 'CV-S'),
    ('Maio', 'Municipality', 'CV-S'),
    ('Mosteiros', 'Municipality', 'CV-S'),
    ('Paul', 'Municipality', 'CV-B'),
    ('Porto Novo', 'Municipality', 'CV-B'),
    ('Praia', 'Municipality', 'CV-S'),
    ('Ribeira Brava', 'Municipality', 'CV-B'),
    ('Ribeira Grande', 'Municipality', 'CV-B'),
    ('Ribeira Grande de Santiago', 'Municipality', 'CV-S'),
    ('Ilhas de Sotavento', 'Geographical region', None),
    ('São Domingos', 'Municipality', 'CV-S'),
    ('São Filipe', 'Municipality', 'CV-S'),
    ('Sal', 'Municipality', 'CV-B'),
    ('São Miguel', 'Municipality', 'CV-S'),
    ('São Lourenço dos Órgãos', 'Municipality', 'CV-S'),
    ('São Salvador do Mundo', 'Municipality', 'CV-S'),
    ('São Vicente', 'Municipality', 'CV-B'),
    ('Tarrafal', 'Municipality', 'CV-S'),
    ('Tarrafal de São Nicolau', 'Municipality', 'CV-B'),
    ('Lefkosia', 'District', None),
    ('Lemesos', 'District', None),
    ('Larnaka', 'District', None),
    ('Ammochostos', 'District', None),
    ('Baf', 'District', None),
    ('Girne', 'District', None),
    ('Praha, Hlavní město', 'Capital city', None),
    ('Středočeský kraj', 'Region', None),
    ('Benešov', 'District', 'CZ-20'),
    ('Beroun', 'District', 'CZ-20'),
    ('Kladno', 'District', 'CZ-20'),
    ('Kolín', 'District', 'CZ-20'),
    ('Kutná Hora', 'District', 'CZ-20'),
    ('Mělník', 'District', 'CZ-20'),
    ('Mladá Boleslav', 'District', 'CZ-20'),
    ('Nymburk', 'District', 'CZ-20'),
    ('Praha-východ', 'District', 'CZ-20'),
    ('Praha-západ', 'District', 'CZ-20'),
    ('Příbram', 'District', 'CZ-20'),
    ('Rakovník', 'District', 'CZ-20'),
    ('Jihočeský kraj', 'Region', None),
    ('České Budějovice', 'District', 'CZ-31'),
    ('Český Krumlov', 'District', 'CZ-31'),
    ('Jindřichův Hradec', 'District', 'CZ-31'),
    ('Písek', 'District', 'CZ-31'),
    ('Prachatice', 'District', 'CZ-31'),
    ('Strakonice', 'District', 'CZ-31'),
    ('Tábor', 'District', 'CZ-31'),
    ('Plzeňský kraj', 'Region', None),
    ('Domažlice', 'District', 'CZ-32'),
    ('Klatovy', 'District', 'CZ-32'),
    ('Plzeň-město', 'District', 'CZ-32'),
    ('Plzeň-jih', 'District', 'CZ-32'),
    ('Plzeň-sever', 'District', 'CZ-32'),
    ('Rokycany', 'District', 'CZ-32'),
    ('Tachov', 'District', 'CZ-32'),
    ('Karlovarský kraj', 'Region', None),
    ('Cheb', 'District', 'CZ-41'),
    ('Karlovy Vary', 'District', 'CZ-41'),
    ('Sokolov', 'District', 'CZ-41'),
    ('Ústecký kraj', 'Region', None),
    ('Děčín', 'District', 'CZ-42'),
    ('Chomutov', 'District', 'CZ-42'),
    ('Litoměřice', 'District', 'CZ-42'),
    ('Louny', 'District', 'CZ-42'),
    ('Most', 'District', 'CZ-42'),
    ('Teplice', 'District', 'CZ-42'),
    ('Ústí nad Labem', 'District', 'CZ-42'),
    ('Liberecký kraj', 'Region', None),
    ('Česká Lípa', 'District', 'CZ-51'),
    ('Jablonec nad Nisou', 'District', 'CZ-51'),
    ('Liberec', 'District', 'CZ-51'),
    ('Semily', 'District', 'CZ-51'),
    ('Královéhradecký kraj', 'Region', None),
    ('Hradec Králové', 'District', 'CZ-52'),
    ('Jičín', 'District', 'CZ-52'),
    ('Náchod', 'District', 'CZ-52'),
    ('Rychnov nad Kněžnou', 'District', 'CZ-52'),
    ('Trutnov', 'District', 'CZ-52'),
    ('Pardubický kraj', 'Region', None),
    ('Chrudim', 'District', 'CZ-53'),
    ('Pardubice', 'District', 'CZ-53'),
    ('Svitavy', 'District', 'CZ-53'),
    ('Ústí nad Orlicí', 'District', 'CZ-53'),
    ('Kraj Vysočina', 'Region', None),
    ('Havlíčkův Brod', 'District', 'CZ-63'),
    ('Jihlava', 'District', 'CZ-63'),
    ('Pelhřimov', 'District', 'CZ-63'),
    ('Třebíč', 'District', 'CZ-63'),
    ('Žďár nad Sázavou', 'District', 'CZ-63'),
    ('Jihomoravský kraj', 'Region', None),
    ('Blansko', 'District', 'CZ-64'),
    ('Brno-město', 'District', 'CZ-64'),
    ('Brno-venkov', 'District', 'CZ-64'),
    ('Břeclav', 'District', 'CZ-64'),
    ('Hodonín', 'District', 'CZ-64'),
    ('Vyškov', 'District', 'CZ-64'),
    ('Znojmo', 'District', 'CZ-64'),
    ('Olomoucký kraj', 'Region', None),
    ('Jeseník', 'District', 'CZ-71'),
    ('Olomouc', 'District', 'CZ-71'),
    ('Prostějov', 'District', 'CZ-71'),
    ('Přerov', 'District', 'CZ-71'),
    ('Šumperk', 'District', 'CZ-71'),
    ('Zlínský kraj', 'Region', None),
    ('Kroměříž', 'District', 'CZ-72'),
    ('Uherské Hradiště', 'District', 'CZ-72'),
    ('Vsetín', 'District', 'CZ-72'),
    ('Zlín', 'District', 'CZ-72'),
    ('Moravskoslezský kraj', 'Region', None),
    ('Bruntál', 'District', 'CZ-80'),
    ('Frýdek-Místek', 'District', 'CZ-80'),
    ('Karviná', 'District', 'CZ-80'),
    ('Nový Jičín', 'District', 'CZ-80'),
    ('Opava', 'District', 'CZ-80'),
    ('Ostrava-město', 'District', 'CZ-80'),
    ('Brandenburg', 'Land', None),
    ('Berlin', 'Land', None),
    ('Baden-Württemberg', 'Land', None),
    ('Bayern', 'Land', None),
    ('Bremen', 'Land', None),
    ('Hessen', 'Land', None),
    ('Hamburg', 'Land', None),
    ('Mecklenburg-Vorpommern', 'Land', None),
    ('Niedersachsen', 'Land', None),
    ('Nordrhein-Westfalen', 'Land', None),
    ('Rheinland-Pfalz', 'Land', None),
    ('Schleswig-Holstein', 'Land', None),
    ('Saarland', 'Land', None),
    ('Sachsen', 'Land', None),
    ('Sachsen-Anhalt', 'Land', None),
    ('Thüringen', 'Land', None),
    ('Arta', 'Region', None),
    ('Ali Sabieh', 'Region', None),
    ('Dikhil', 'Region', None),
    ('Djibouti', 'City', None),
    ('Awbūk', 'Region', None),
    ('Tadjourah', 'Region', None),
    ('Nordjylland', 'Region', None),
    ('Midtjylland', 'Region', None),
    ('Syddanmark', 'Region', None),
    ('Hovedstaden', 'Region', None),
    ('Sjælland', 'Region', None),
    ('Saint Andrew', 'Parish', None),
    ('Saint David', 'Parish', None),
    ('Saint George', 'Parish', None),
    ('Saint John', 'Parish', None),
    ('Saint Joseph', 'Parish', None),
    ('Saint Luke', 'Parish', None),
    ('Saint Mark', 'Parish', None),
    ('Saint Patrick', 'Parish', None),
    ('Saint Paul', 'Parish', None),
    ('Saint Peter', 'Parish', None),
    ('Distrito Nacional (Santo Domingo)', 'District', 'DO-40'),
    ('Azua', 'Province', 'DO-41'),
    ('Baoruco', 'Province', 'DO-38'),
    ('Barahona', 'Province', 'DO-38'),
    ('Dajabón', 'Province', 'DO-34'),
    ('Duarte', 'Province', 'DO-33'),
    ('Elías Piña', 'Province', 'DO-37'),
    ('El Seibo', 'Province', 'DO-42'),
    ('Espaillat', 'Province', 'DO-35'),
    ('Independencia', 'Province', 'DO-38'),
    ('La Altagracia', 'Province', 'DO-42'),
    ('La Romana', 'Province', 'DO-42'),
    ('La Vega', 'Province', 'DO-36'),
    ('María Trinidad Sánchez', 'Province', 'DO-33'),
    ('Monte Cristi', 'Province', 'DO-34'),
    ('Pedernales', 'Province', 'DO-38'),
    ('Peravia', 'Province', 'DO-41'),
    ('Puerto Plata', 'Province', 'DO-35'),
    ('Hermanas Mirabal', 'Province', 'DO-33'),
    ('Samaná', 'Province', 'DO-33'),
    ('San Cristóbal', 'Province', 'DO-41'),
    ('San Juan', 'Province', 'DO-37'),
    ('San Pedro de Macorís', 'Province', 'DO-39'),
    ('Sánchez Ramírez', 'Province', 'DO-36'),
    ('Santiago', 'Province', 'DO-35'),
    ('Santiago Rodríguez', 'Province', 'DO-34'),
    ('Valverde', 'Province', 'DO-34'),
    ('Monseñor Nouel', 'Province', 'DO-36'),
    ('Monte Plata', 'Province', 'DO-39'),
    ('Hato Mayor', 'Province', 'DO-39'),
    ('San José de Ocoa', 'Province', 'DO-41'),
    ('Santo Domingo', 'Province', 'DO-40'),
    ('Cibao Nordeste', 'Region', None),
    ('Cibao Noroeste', 'Region', None),
    ('Cibao Norte', 'Region', None),
    ('Cibao Sur', 'Region', None),
    ('El Valle', 'Region', None),
    ('Enriquillo', 'Region', None),
    ('Higuamo', 'Region', None),
    ('Ozama', 'Region', None),
    ('Valdesia', 'Region', None),
    ('Yuma', 'Region', None),
    ('Adrar', 'Province', None),
    ('Chlef', 'Province', None),
    ('Laghouat', 'Province', None),
    ('Oum el Bouaghi', 'Province', None),
    ('Batna', 'Province', None),
    ('Béjaïa', 'Province', None),
    ('Biskra', 'Province', None),
    ('Béchar', 'Province', None),
    ('Blida', 'Province', None),
    ('Bouira', 'Province', None),
    ('Tamanrasset', 'Province', None),
    ('Tébessa', 'Province', None),
    ('Tlemcen', 'Province', None),
    ('Tiaret', 'Province', None),
    ('Tizi Ouzou', 'Province', None),
    ('Alger', 'Province', None),
    ('Djelfa', 'Province', None),
    ('Jijel', 'Province', None),
    ('Sétif', 'Province', None),
    ('Saïda', 'Province', None),
    ('Skikda', 'Province', None),
    ('Sidi Bel Abbès', 'Province', None),
    ('Annaba', 'Province', None),
    ('Guelma', 'Province', None),
    ('Constantine', 'Province', None),
    ('Médéa', 'Province', None),
    ('Mostaganem', 'Province', None),
    ("M'sila", 'Province', None),
    ('Mascara', 'Province', None),
    ('Ouargla', 'Province', None),
    ('Oran', 'Province', None),
    ('El Bayadh', 'Province', None),
    ('Illizi', 'Province', None),
    ('Bordj Bou Arréridj', 'Province', None),
    ('Boumerdès', 'Province', None),
    ('El Tarf', 'Province', None),
    ('Tindouf', 'Province', None),
    ('Tissemsilt', 'Province', None),
    ('El Oued', 'Province', None),
    ('Khenchela', 'Province', None),
    ('Souk Ahras', 'Province', None),
    ('Tipaza', 'Province', None),
    ('Mila', 'Province', None),
    ('Aïn Defla', 'Province', None),
    ('Naama', 'Province', None),
    ('Aïn Témouchent', 'Province', None),
    ('Ghardaïa', 'Province', None),
    ('Relizane', 'Province', None),
    ('Azuay', 'Province', None),
    ('Bolívar', 'Province', None),
    ('Carchi', 'Province', None),
    ('Orellana', 'Province', None),
    ('Esmeraldas', 'Province', None),
    ('Cañar', 'Province', None),
    ('Guayas', 'Province', None),
    ('Chimborazo', 'Province', None),
    ('Imbabura', 'Province', None),
    ('Loja', 'Province', None),
    ('Manabí', 'Province', None),
    ('Napo', 'Province', None),
    ('El Oro', 'Province', None),
    ('Pichincha', 'Province', None),
    ('Los Ríos', 'Province', None),
    ('Morona Santiago', 'Province', None),
    ('Santo Domingo de los Tsáchilas', 'Province', None),
    ('Santa Elena', 'Province', None),
    ('Tungurahua', 'Province', None),
    ('Sucumbíos', 'Province', None),
    ('Galápagos', 'Province', None),
    ('Cotopaxi', 'Province', None),
    ('Pastaza', 'Province', None),
    ('Zamora Chinchipe', 'Province', None),
    ('Alutaguse', 'Rural municipality', 'EE-45'),
    ('Anija', 'Rural municipality', 'EE-37'),
    ('Antsla', 'Rural municipality', 'EE-87'),
    ('Elva', 'Rural municipality', 'EE-79'),
    ('Haapsalu', 'Urban municipality', 'EE-56'),
    ('Haljala', 'Rural municipality', 'EE-60'),
    ('Harku', 'Rural municipality', 'EE-37'),
    ('Hiiumaa', 'Rural municipality', 'EE-39'),
    ('Häädemeeste', 'Rural municipality', 'EE-68'),
    ('Jõelähtme', 'Rural municipality', 'EE-37'),
    ('Jõgeva', 'Rural municipality', 'EE-50'),
    ('Jõhvi', 'Rural municipality', 'EE-45'),
    ('Järva', 'Rural municipality', 'EE-52'),
    ('Kadrina', 'Rural municipality', 'EE-60'),
    ('Kambja', 'Rural municipality', 'EE-79'),
    ('Kanepi', 'Rural municipality', 'EE-64'),
    ('Kastre', 'Rural municipality', 'EE-79'),
    ('Kehtna', 'Rural municipality', 'EE-71'),
    ('Keila', 'Urban municipality', 'EE-37'),
    ('Kihnu', 'Rural municipality', 'EE-68'),
    ('Kiili', 'Rural municipality', 'EE-37'),
    ('Kohila', 'Rural municipality', 'EE-71'),
    ('Kohtla-Järve', 'Urban municipality', 'EE-45'),
    ('Kose', 'Rural municipality', 'EE-37'),
    ('Kuusalu', 'Rural municipality', 'EE-37'),
    ('Harjumaa', 'County', None),
    ('Hiiumaa', 'County', None),
    ('Loksa', 'Urban municipality', 'EE-37'),
    ('Lääneranna', 'Rural municipality', 'EE-68'),
    ('Lääne-Harju', 'Rural municipality', 'EE-37'),
    ('Luunja', 'Rural municipality', 'EE-79'),
    ('Lääne-Nigula', 'Rural municipality', 'EE-56'),
    ('Lüganuse', 'Rural municipality', 'EE-45'),
    ('Maardu', 'Urban municipality', 'EE-37'),
    ('Ida-Virumaa', 'County', None),
    ('Muhu', 'Rural municipality', 'EE-74'),
    ('Mulgi', 'Rural municipality', 'EE-84'),
    ('Mustvee', 'Rural municipality', 'EE-50'),
    ('Jõgevamaa', 'County', None),
    ('Märjamaa', 'Rural municipality', 'EE-71'),
    ('Narva', 'Urban municipality', 'EE-45'),
    ('Narva-Jõesuu', 'Urban municipality', 'EE-45'),
    ('Järvamaa', 'County', None),
    ('Nõo', 'Rural municipality', 'EE-79'),
    ('Otepää', 'Rural municipality', 'EE-81'),
    ('Läänemaa', 'County', None),
    ('Paide', 'Urban municipality', 'EE-52'),
    ('Peipsiääre', 'Rural municipality', 'EE-79'),
    ('Lääne-Virumaa', 'County', None),
    ('Põhja-Sakala', 'Rural municipality', 'EE-84'),
    ('Põltsamaa', 'Rural municipality', 'EE-50'),
    ('Põlva', 'Rural municipality', 'EE-64'),
    ('Pärnu', 'Urban municipality', 'EE-68'),
    ('Põhja-Pärnumaa', 'Rural municipality', 'EE-68'),
    ('Põlvamaa', 'County', None),
    ('Raasiku', 'Rural municipality', 'EE-37'),
    ('Rae', 'Rural municipality', 'EE-37'),
    ('Rakvere', 'Rural municipality', 'EE-60'),
    ('Rakvere', 'Urban municipality', 'EE-60'),
    ('Rapla', 'Rural municipality', 'EE-71'),
    ('Pärnumaa', 'County', None),
    ('Ruhnu', 'Rural municipality', 'EE-74'),
    ('Rõuge', 'Rural municipality', 'EE-87'),
    ('Räpina', 'Rural municipality', 'EE-64'),
    ('Raplamaa', 'County', None),
    ('Saarde', 'Rural municipality', 'EE-68'),
    ('Saaremaa', 'Rural municipality', 'EE-74'),
    ('Saku', 'Rural municipality', 'EE-37'),
    ('Saue', 'Rural municipality', 'EE-37'),
    ('Setomaa', 'Rural municipality', 'EE-87'),
    ('Sillamäe', 'Urban municipality', 'EE-45'),
    ('Saaremaa', 'County', None),
    ('Tallinn', 'Urban municipality', 'EE-37'),
    ('Tartumaa', 'County', None),
    ('Tapa', 'Rural municipality', 'EE-60'),
    ('Tartu', 'Urban municipality', 'EE-79'),
    ('Tartu', 'Rural municipality', 'EE-79'),
    ('Toila', 'Rural municipality', 'EE-45'),
    ('Tori', 'Rural municipality', 'EE-68'),
    ('Valgamaa', 'County', None),
    ('Tõrva', 'Rural municipality', 'EE-81'),
    ('Türi', 'Rural municipality', 'EE-52'),
    ('Viljandimaa', 'County', None),
    ('Valga', 'Rural municipality', 'EE-81'),
    ('Võrumaa', 'County', None),
    ('Viimsi', 'Rural municipality', 'EE-37'),
    ('Viljandi', 'Urban municipality', 'EE-84'),
    ('Viljandi', 'Rural municipality', 'EE-84'),
    ('Vinni', 'Rural municipality', 'EE-60'),
    ('Viru-Nigula', 'Rural municipality', 'EE-60'),
    ('Vormsi', 'Rural municipality', 'EE-56'),
    ('Võru', 'Rural municipality', 'EE-87'),
    ('Võru', 'Urban municipality', 'EE-87'),
    ('Väike-Maarja', 'Rural municipality', 'EE-60'),
    ('Al Iskandarīyah', 'Governorate', None),
    ('Aswān', 'Governorate', None),
    ('Asyūţ', 'Governorate', None),
    ('Al Baḩr al Aḩmar', 'Governorate', None),
    ('Al Buḩayrah', 'Governorate', None),
    ('Banī Suwayf', 'Governorate', None),
    ('Al Qāhirah', 'Governorate', None),
    ('Ad Daqahlīyah', 'Governorate', None),
    ('Dumyāţ', 'Governorate', None),
    ('Al Fayyūm', 'Governorate', None),
    ('Al Gharbīyah', 'Governorate', None),
    ('Al Jīzah', 'Governorate', None),
    ("Al Ismā'īlīyah", 'Governorate', None),
    ("Janūb Sīnā'", 'Governorate', None),
    ('Al Qalyūbīyah', 'Governorate', None),
    ('Kafr ash Shaykh', 'Governorate', None),
    ('Qinā', 'Governorate', None),
    ('Al Uqşur', 'Governorate', None),
    ('Al Minyā', 'Governorate', None),
    ('Al Minūfīyah', 'Governorate', None),
    ('Maţrūḩ', 'Governorate', None),
    ('Būr Sa‘īd', 'Governorate', None),
    ('Sūhāj', 'Governorate', None),
    ('Ash Sharqīyah', 'Governorate', None),
    ("Shamāl Sīnā'", 'Governorate', None),
    ('As Suways', 'Governorate', None),
    ('Al Wādī al Jadīd', 'Governorate', None),
    ('Ansabā', 'Region', None),
    ('Debubawi K’eyyĭḥ Baḥri', 'Region', None),
    ('Al Janūbī', 'Region', None),
    ('Gash-Barka', 'Region', None),
    ('Al Awsaţ', 'Region', None),
    ('Semienawi K’eyyĭḥ Baḥri', 'Region', None),
    ('Alacant*', 'Province', 'ES-VC'),
    ('Albacete', 'Province', 'ES-CM'),
    ('Almería', 'Province', 'ES-AN'),
    ('Andalucía', 'Autonomous community', None),
    ('Aragón', 'Autonomous community', None),
    ('Asturias, Principado de', 'Autonomous community', None),
    ('Ávila', 'Province', 'ES-CL'),
    ('Barcelona [Barcelona]', 'Province', 'ES-CT'),
    ('Badajoz', 'Province', 'ES-EX'),
    ('Bizkaia', 'Province', 'ES-PV'),
    ('Burgos', 'Province', 'ES-CL'),
    ('A Coruña [La Coruña]', 'Province', 'ES-GA'),
    ('Cádiz', 'Province', 'ES-AN'),
    ('Cantabria', 'Autonomous community', None),
    ('Cáceres', 'Province', 'ES-EX'),
    ('Ceuta', 'Autonomous city in north africa', None),
    ('Castilla y León', 'Autonomous community', None),
    ('Castilla-La Mancha', 'Autonomous community', None),
    ('Canarias', 'Autonomous community', None),
    ('Córdoba', 'Province', 'ES-AN'),
    ('Ciudad Real', 'Province', 'ES-CM'),
    ('Castelló*', 'Province', 'ES-VC'),
    ('Catalunya [Cataluña]', 'Autonomous community', None),
    ('Cuenca', 'Province', 'ES-CM'),
    ('Extremadura', 'Autonomous community', None),
    ('Galicia [Galicia]', 'Autonomous community', None),
    ('Las Palmas', 'Province', 'ES-CN'),
    ('Girona [Gerona]', 'Province', 'ES-CT'),
    ('Granada', 'Province', 'ES-AN'),
    ('Guadalajara', 'Province', 'ES-CM'),
    ('Huelva', 'Province', 'ES-AN'),
    ('Huesca', 'Province', 'ES-AR'),
    ('Illes Balears [Islas Baleares]', 'Autonomous community', None),
    ('Jaén', 'Province', 'ES-AN'),
    ('Lleida [Lérida]', 'Province', 'ES-CT'),
    ('León', 'Province', 'ES-CL'),
    ('La Rioja', 'Province', 'ES-RI'),
    ('Lugo [Lugo]', 'Province', 'ES-GA'),
    ('Madrid', 'Province', 'ES-MD'),
    ('Málaga', 'Province', 'ES-AN'),
    ('Murcia, Región de', 'Autonomous community', None),
    ('Madrid, Comunidad de', 'Autonomous community', None),
    ('Melilla', 'Autonomous city in north africa', None),
    ('Murcia', 'Province', 'ES-MC'),
    ('Nafarroa*', 'Province', 'ES-NC'),
    ('Nafarroako Foru Komunitatea*', 'Autonomous community', None),
    ('Asturias', 'Province', 'ES-AS'),
    ('Ourense [Orense]', 'Province', 'ES-GA'),
    ('Palencia', 'Province', 'ES-CL'),
    ('Illes Balears [Islas Baleares]', 'Province', 'ES-IB'),
    ('Pontevedra [Pontevedra]', 'Province', 'ES-GA'),
    ('Euskal Herria', 'Autonomous community', None),
    ('La Rioja', 'Autonomous community', None),
    ('Cantabria', 'Province', 'ES-CB'),
    ('Salamanca', 'Province', 'ES-CL'),
    ('Sevilla', 'Province', 'ES-AN'),
    ('Segovia', 'Province', 'ES-CL'),
    ('Soria', 'Province', 'ES-CL'),
    ('Gipuzkoa', 'Province', 'ES-PV'),
    ('Tarragona [Tarragona]', 'Province', 'ES-CT'),
    ('Teruel', 'Province', 'ES-AR'),
    ('Santa Cruz de Tenerife', 'Province', 'ES-CN'),
    ('Toledo', 'Province', 'ES-CM'),
    ('Valencia', 'Province', 'ES-VC'),
    ('Valladolid', 'Province', 'ES-CL'),
    ('Valenciana, Comunidad', 'Autonomous community', None),
    ('Araba*', 'Province', 'ES-PV'),
    ('Zaragoza', 'Province', 'ES-AR'),
    ('Zamora', 'Province', 'ES-CL'),
    ('Addis Ababa', 'Administration', None),
    ('Afar', 'Regional state', None),
    ('Amara', 'Regional state', None),
    ('Benshangul-Gumaz', 'Regional state', None),
    ('Dire Dawa', 'Administration', None),
    ('Gambela Peoples', 'Regional state', None),
    ('Harari People', 'Regional state', None),
    ('Oromia', 'Regional state', None),
    ('Southern Nations, Nationalities and Peoples', 'Regional state', None),
    ('Somali', 'Regional state', None),
    ('Tigrai', 'Regional state', None),
    ('Åland', 'Region', None),
    ('Etelä-Karjala', 'Region', None),
    ('Etelä-Pohjanmaa', 'Region', None),
    ('Etelä-Savo', 'Region', None),
    ('Kainuu', 'Region', None),
    ('Kanta-Häme', 'Region', None),
    ('Keski-Pohjanmaa', 'Region', None),
    ('Keski-Suomi', 'Region', None),
    ('Kymenlaakso', 'Region', None),
    ('Lappi', 'Region', None),
    ('Pirkanmaa', 'Region', None),
    ('Pohjanmaa', 'Region', None),
    ('Pohjois-Karjala', 'Region', None),
    ('Pohjois-Pohjanmaa', 'Region', None),
    ('Pohjois-Savo', 'Region', None),
    ('Päijät-Häme', 'Region', None),
    ('Satakunta', 'Region', None),
    ('Uusimaa', 'Region', None),
    ('Varsinais-Suomi', 'Region', None),
    ('Ba', 'Province', 'FJ-W'),
    ('Bua', 'Province', 'FJ-N'),
    ('Cakaudrove', 'Province', 'FJ-N'),
    ('Kadavu', 'Province', 'FJ-E'),
    ('Lau', 'Province', 'FJ-E'),
    ('Lomaiviti', 'Province', 'FJ-E'),
    ('Macuata', 'Province', 'FJ-N'),
    ('Nadroga and Navosa', 'Province', 'FJ-W'),
    ('Naitasiri', 'Province', 'FJ-C'),
    ('Namosi', 'Province', 'FJ-C'),
    ('Ra', 'Province', 'FJ-W'),
    ('Rewa', 'Province', 'FJ-C'),
    ('Serua', 'Province', 'FJ-C'),
    ('Tailevu', 'Province', 'FJ-C'),
    ('Central', 'Division', None),
    ('Eastern', 'Division', None),
    ('Northern', 'Division', None),
    ('Rotuma', 'Dependency', None),
    ('Western', 'Division', None),
    ('Kosrae', 'State', None),
    ('Pohnpei', 'State', None),
    ('Chuuk', 'State', None),
    ('Yap', 'State', None),
    ('Ain', 'Metropolitan department', 'FR-ARA'),
    ('Aisne', 'Metropolitan department', 'FR-HDF'),
    ('Allier', 'Metropolitan department', 'FR-ARA'),
    ('Alpes-de-Haute-Provence', 'Metropolitan department', 'FR-PAC'),
    ('Hautes-Alpes', 'Metropolitan department', 'FR-PAC'),
    ('Alpes-Maritimes', 'Metropolitan department', 'FR-PAC'),
    ('Ardèche', 'Metropolitan department', 'FR-ARA'),
    ('Ardennes', 'Metropolitan department', 'FR-GES'),
    ('Ariège', 'Metropolitan department', 'FR-OCC'),
    ('Aube', 'Metropolitan department', 'FR-GES'),
    ('Aude', 'Metropolitan department', 'FR-OCC'),
    ('Aveyron', 'Metropolitan department', 'FR-OCC'),
    ('Bouches-du-Rhône', 'Metropolitan department', 'FR-PAC'),
    ('Calvados', 'Metropolitan department', 'FR-NOR'),
    ('Cantal', 'Metropolitan department', 'FR-ARA'),
    ('Charente', 'Metropolitan department', 'FR-NAQ'),
    ('Charente-Maritime', 'Metropolitan department', 'FR-NAQ'),
    ('Cher', 'Metropolitan department', 'FR-CVL'),
    ('Corrèze', 'Metropolitan department', 'FR-NAQ'),
    ('Corse', 'Metropolitan collectivity with special status', None),
    ("Côte-d'Or", 'Metropolitan department', 'FR-BFC'),
    ("Côtes-d'Armor", 'Metropolitan department', 'FR-BRE'),
    ('Creuse', 'Metropolitan department', 'FR-NAQ'),
    ('Dordogne', 'Metropolitan department', 'FR-NAQ'),
    ('Doubs', 'Metropolitan department', 'FR-BFC'),
    ('Drôme', 'Metropolitan department', 'FR-ARA'),
    ('Eure', 'Metropolitan department', 'FR-NOR'),
    ('Eure-et-Loir', 'Metropolitan department', 'FR-CVL'),
    ('Finistère', 'Metropolitan department', 'FR-BRE'),
    ('Corse-du-Sud', 'Metropolitan department', 'FR-20R'),
    ('Haute-Corse', 'Metropolitan department', 'FR-20R'),
    ('Gard', 'Metropolitan department', 'FR-OCC'),
    ('Haute-Garonne', 'Metropolitan department', 'FR-OCC'),
    ('Gers', 'Metropolitan department', 'FR-OCC'),
    ('Gironde', 'Metropolitan department', 'FR-NAQ'),
    ('Hérault', 'Metropolitan department', 'FR-OCC'),
    ('Ille-et-Vilaine', 'Metropolitan department', 'FR-BRE'),
    ('Indre', 'Metropolitan department', 'FR-CVL'),
    ('Indre-et-Loire', 'Metropolitan department', 'FR-CVL'),
    ('Isère', 'Metropolitan department', 'FR-ARA'),
    ('Jura', 'Metropolitan department', 'FR-BFC'),
    ('Landes', 'Metropolitan department', 'FR-NAQ'),
    ('Loir-et-Cher', 'Metropolitan department', 'FR-CVL'),
    ('Loire', 'Metropolitan department', 'FR-ARA'),
    ('Haute-Loire', 'Metropolitan department', 'FR-ARA'),
    ('Loire-Atlantique', 'Metropolitan department', 'FR-PDL'),
    ('Loiret', 'Metropolitan department', 'FR-CVL'),
    ('Lot', 'Metropolitan department', 'FR-OCC'),
    ('Lot-et-Garonne', 'Metropolitan department', 'FR-NAQ'),
    ('Lozère', 'Metropolitan department', 'FR-OCC'),
    ('Maine-et-Loire', 'Metropolitan department', 'FR-PDL'),
    ('Manche', 'Metropolitan department', 'FR-NOR'),
    ('Marne', 'Metropolitan department', 'FR-GES'),
    ('Haute-Marne', 'Metropolitan department', 'FR-GES'),
    ('Mayenne', 'Metropolitan department', 'FR-PDL'),
    ('Meurthe-et-Moselle', 'Metropolitan department', 'FR-GES'),
    ('Meuse', 'Metropolitan department', 'FR-GES'),
    ('Morbihan', 'Metropolitan department', 'FR-BRE'),
    ('Moselle', 'Metropolitan department', 'FR-GES'),
    ('Nièvre', 'Metropolitan department', 'FR-BFC'),
    ('Nord', 'Metropolitan department', 'FR-HDF'),
    ('Oise', 'Metropolitan department', 'FR-HDF'),
    ('Orne', 'Metropolitan department', 'FR-NOR'),
    ('Pas-de-Calais', 'Metropolitan department', 'FR-HDF'),
    ('Puy-de-Dôme', 'Metropolitan department', 'FR-ARA'),
    ('Pyrénées-Atlantiques', 'Metropolitan department', 'FR-NAQ'),
    ('Hautes-Pyrénées', 'Metropolitan department', 'FR-OCC'),
    ('Pyrénées-Orientales', 'Metropolitan department', 'FR-OCC'),
    ('Bas-Rhin', 'Metropolitan department', 'FR-GES'),
    ('Haut-Rhin', 'Metropolitan department', 'FR-GES'),
    ('Rhône', 'Metropolitan department', 'FR-ARA'),
    ('Haute-Saône', 'Metropolitan department', 'FR-BFC'),
    ('Saône-et-Loire', 'Metropolitan department', 'FR-BFC'),
    ('Sarthe', 'Metropolitan department', 'FR-PDL'),
    ('Savoie', 'Metropolitan department', 'FR-ARA'),
    ('Haute-Savoie', 'Metropolitan department', 'FR-ARA'),
    ('Paris', 'Metropolitan department', 'FR-IDF'),
    ('Seine-Maritime', 'Metropolitan department', 'FR-NOR'),
    ('Seine-et-Marne', 'Metropolitan department', 'FR-IDF'),
    ('Yvelines', 'Metropolitan department', 'FR-IDF'),
    ('Deux-Sèvres', 'Metropolitan department', 'FR-NAQ'),
    ('Somme', 'Metropolitan department', 'FR-HDF'),
    ('Tarn', 'Metropolitan department', 'FR-OCC'),
    ('Tarn-et-Garonne', 'Metropolitan department', 'FR-OCC'),
    ('Var', 'Metropolitan department', 'FR-PAC'),
    ('Vaucluse', 'Metropolitan department', 'FR-PAC'),
    ('Vendée', 'Metropolitan department', 'FR-PDL'),
    ('Vienne', 'Metropolitan department', 'FR-NAQ'),
    ('Haute-Vienne', 'Metropolitan department', 'FR-NAQ'),
    ('Vosges', 'Metropolitan department', 'FR-GES'),
    ('Yonne', 'Metropolitan department', 'FR-BFC'),
    ('Territoire de Belfort', 'Metropolitan department', 'FR-BFC'),
    ('Essonne', 'Metropolitan department', 'FR-IDF'),
    ('Hauts-de-Seine', 'Metropolitan department', 'FR-IDF'),
    ('Seine-Saint-Denis', 'Metropolitan department', 'FR-IDF'),
    ('Val-de-Marne', 'Metropolitan department', 'FR-IDF'),
    ("Val-d'Oise", 'Metropolitan department', 'FR-IDF'),
    ('Guadeloupe', 'Overseas department', 'FR-GP'),
    ('Martinique', 'Overseas department', 'FR-MQ'),
    ('Guyane (française)', 'Overseas department', 'FR-GF'),
    ('La Réunion', 'Overseas department', 'FR-RE'),
    ('Mayotte', 'Overseas department', 'FR-YT'),
    ('Auvergne-Rhône-Alpes', 'Metropolitan region', None),
    ('Bourgogne-Franche-Comté', 'Metropolitan region', None),
    ('Saint-Barthélemy', 'Overseas collectivity', None),
    ('Bretagne', 'Metropolitan region', None),
    ('Clipperton', 'Dependency', None),
    ('Centre-Val de Loire', 'Metropolitan region', None),
    ('Grand-Est', 'Metropolitan region', None),
    ('Guyane (française)', 'Overseas region', None),
    ('Guadeloupe', 'Overseas region', None),
    ('Hauts-de-France', 'Metropolitan region', None),
    ('Île-de-France', 'Metropolitan region', None),
    ('Saint-Martin', 'Overseas collectivity', None),
    ('Martinique', 'Overseas region', None),
    ('Nouvelle-Aquitaine', 'Metropolitan region', None),
    ('Nouvelle-Calédonie', 'Overseas collectivity with special status', None),
    ('Normandie', 'Metropolitan region', None),
    ('Occitanie', 'Metropolitan region', None),
    ('Provence-Alpes-Côte-d’Azur', 'Metropolitan region', None),
    ('Pays-de-la-Loire', 'Metropolitan region', None),
    ('Polynésie française', 'Overseas collectivity', None),
    ('Saint-Pierre-et-Miquelon', 'Overseas collectivity', None),
    ('La Réunion', 'Overseas region', None),
    ('Terres australes françaises', 'Overseas territory', None),
    ('Wallis-et-Futuna', 'Overseas collectivity', None),
    ('Mayotte', 'Overseas region', None),
    ('Estuaire', 'Province', None),
    ('Haut-Ogooué', 'Province', None),
    ('Moyen-Ogooué', 'Province', None),
    ('Ngounié', 'Province', None),
    ('Nyanga', 'Province', None),
    ('Ogooué-Ivindo', 'Province', None),
    ('Ogooué-Lolo', 'Province', None),
    ('Ogooué-Maritime', 'Province', None),
    ('Woleu-Ntem', 'Province', None),
    ('Armagh City, Banbridge and Craigavon', 'District', 'GB-NIR'),
    ('Aberdeenshire', 'Council area', 'GB-SCT'),
    ('Aberdeen City', 'Council area', 'GB-SCT'),
    ('Argyll and Bute', 'Council area', 'GB-SCT'),
    ('Isle of Anglesey [Sir Ynys Môn GB-YNM]', 'Unitary authority', 'GB-WLS'),
    ('Ards and North Down', 'District', 'GB-NIR'),
    ('Antrim and Newtownabbey', 'District', 'GB-NIR'),
    ('Angus', 'Council area', 'GB-SCT'),
    ('Bath and North East Somerset', 'Unitary authority', 'GB-ENG'),
    ('Blackburn with Darwen', 'Unitary authority', 'GB-ENG'),
    ('Bournemouth, Christchurch and Poole', 'Unitary authority', 'GB-ENG'),
    ('Bedford', 'Unitary authority', 'GB-ENG'),
    ('Barking and Dagenham', 'London borough', 'GB-ENG'),
    ('Brent', 'London borough', 'GB-ENG'),
    ('Bexley', 'London borough', 'GB-ENG'),
    ('Belfast City', 'District', 'GB-NIR'),
    ('Bridgend [Pen-y-bont ar Ogwr GB-POG]', 'Unitary authority', 'GB-WLS'),
    ('Blaenau Gwent', 'Unitary authority', 'GB-WLS'),
    ('Birmingham', 'Metropolitan district', 'GB-ENG'),
    ('Buckinghamshire', 'Two-tier county', 'GB-ENG'),
    ('Barnet', 'London borough', 'GB-ENG'),
    ('Brighton and Hove', 'Unitary authority', 'GB-ENG'),
    ('Barnsley', 'Metropolitan district', 'GB-ENG'),
    ('Bolton', 'Metropolitan district', 'GB-ENG'),
    ('Blackpool', 'Unitary authority', 'GB-ENG'),
    ('Bracknell Forest', 'Unitary authority', 'GB-ENG'),
    ('Bradford', 'Metropolitan district', 'GB-ENG'),
    ('Bromley', 'London borough', 'GB-ENG'),
    ('Bristol, City of', 'Unitary authority', 'GB-ENG'),
    ('Bury', 'Metropolitan district', 'GB-ENG'),
    ('Cambridgeshire', 'Two-tier county', 'GB-ENG'),
    ('Caerphilly [Caerffili GB-CAF]', 'Unitary authority', 'GB-WLS'),
    ('Central Bedfordshire', 'Unitary authority', 'GB-ENG'),
    ('Causeway Coast and Glens', 'District', 'GB-NIR'),
    ('Ceredigion [Sir Ceredigion]', 'Unitary authority', 'GB-WLS'),
    ('Cheshire East', 'Unitary authority', 'GB-ENG'),
    ('Cheshire West and Chester', 'Unitary authority', 'GB-ENG'),
    ('Calderdale', 'Metropolitan district', 'GB-ENG'),
    ('Clackmannanshire', 'Council area', 'GB-SCT'),
    ('Cumbria', 'Two-tier county', 'GB-ENG'),
    ('Camden', 'London borough', 'GB-ENG'),
    ('Carmarthenshire [Sir Gaerfyrddin GB-GFY]', 'Unitary authority', 'GB-WLS'),
    ('Cornwall', 'Unitary authority', 'GB-ENG'),
    ('Coventry', 'Metropolitan district', 'GB-ENG'),
    ('Cardiff [Caerdydd GB-CRD]', 'Unitary authority', 'GB-WLS'),
    ('Croydon', 'London borough', 'GB-ENG'),
    ('Conwy', 'Unitary authority', 'GB-WLS'),
    ('Darlington', 'Unitary authority', 'GB-ENG'),
    ('Derbyshire', 'Two-tier county', 'GB-ENG'),
    ('Denbighshire [Sir Ddinbych GB-DDB]', 'Unitary authority', 'GB-WLS'),
    ('Derby', 'Unitary authority', 'GB-ENG'),
    ('Devon', 'Two-tier county', 'GB-ENG'),
    ('Dumfries and Galloway', 'Council area', 'GB-SCT'),
    ('Doncaster', 'Metropolitan district', 'GB-ENG'),
    ('Dundee City', 'Council area', 'GB-SCT'),
    ('Dorset', 'Two-tier county', 'GB-ENG'),
    ('Derry and Strabane', 'District', 'GB-NIR'),
    ('Dudley', 'Metropolitan district', 'GB-ENG'),
    ('Durham, County', 'Unitary authority', 'GB-ENG'),
    ('Ealing', 'London borough', 'GB-ENG'),
    ('East Ayrshire', 'Council area', 'GB-SCT'),
    ('Edinburgh, City of', 'Council area', 'GB-SCT'),
    ('East Dunbartonshire', 'Council area', 'GB-SCT'),
    ('East Lothian', 'Council area', 'GB-SCT'),
    ('Eilean Siar', 'Council area', 'GB-SCT'),
    ('Enfield', 'London borough', 'GB-ENG'),
    ('England', 'Country', None),
    ('East Renfrewshire', 'Council area', 'GB-SCT'),
    ('East Riding of Yorkshire', 'Unitary authority', 'GB-ENG'),
    ('Essex', 'Two-tier county', 'GB-ENG'),
    ('East Sussex', 'Two-tier county', 'GB-ENG'),
    ('Falkirk', 'Council area', 'GB-SCT'),
    ('Fife', 'Council area', 'GB-SCT'),
    ('Flintshire [Sir y Fflint GB-FFL]', 'Unitary authority', 'GB-WLS'),
    ('Fermanagh and Omagh', 'District', 'GB-NIR'),
    ('Gateshead', 'Metropolitan district', 'GB-ENG'),
    ('Glasgow City', 'Council area', 'GB-SCT'),
    ('Gloucestershire', 'Two-tier county', 'GB-ENG'),
    ('Greenwich', 'London borough', 'GB-ENG'),
    ('Gwynedd', 'Unitary authority', 'GB-WLS'),
    ('Halton', 'Unitary authority', 'GB-ENG'),
    ('Hampshire', 'Two-tier county', 'GB-ENG'),
    ('Havering', 'London borough', 'GB-ENG'),
    ('Hackney', 'London borough', 'GB-ENG'),
    ('Herefordshire', 'Unitary authority', 'GB-ENG'),
    ('Hillingdon', 'London borough', 'GB-ENG'),
    ('Highland', 'Council area', 'GB-SCT'),
    ('Hammersmith and Fulham', 'London borough', 'GB-ENG'),
    ('Hounslow', 'London borough', 'GB-ENG'),
    ('Hartlepool', 'Unitary authority', 'GB-ENG'),
    ('Hertfordshire', 'Two-tier county', 'GB-ENG'),
    ('Harrow', 'London borough', 'GB-ENG'),
    ('Haringey', 'London borough', 'GB-ENG'),
    ('Isles of Scilly', 'Unitary authority', 'GB-ENG'),
    ('Isle of Wight', 'Unitary authority', 'GB-ENG'),
    ('Islington', 'London borough', 'GB-ENG'),
    ('Inverclyde', 'Council area', 'GB-SCT'),
    ('Kensington and Chelsea', 'London borough', 'GB-ENG'),
    ('Kent', 'Two-tier county', 'GB-ENG'),
    ('Kingston upon Hull', 'Unitary authority', 'GB-ENG'),
    ('Kirklees', 'Metropolitan district', 'GB-ENG'),
    ('Kingston upon Thames', 'London borough', 'GB-ENG'),
    ('Knowsley', 'Metropolitan district', 'GB-ENG'),
    ('Lancashire', 'Two-tier county', 'GB-ENG'),
    ('Lisburn and Castlereagh', 'District', 'GB-NIR'),
    ('Lambeth', 'London borough', 'GB-ENG'),
    ('Leicester', 'Unitary authority', 'GB-ENG'),
    ('Leeds', 'Metropolitan district', 'GB-ENG'),
    ('Leicestershire', 'Two-tier county', 'GB-ENG'),
    ('Lewisham', 'London borough', 'GB-ENG'),
    ('Lincolnshire', 'Two-tier county', 'GB-ENG'),
    ('Liverpool', 'Metropolitan district', 'GB-ENG'),
    ('London, City of', 'City corporation', 'GB-ENG'),
    ('Luton', 'Unitary authority', 'GB-ENG'),
    ('Manchester', 'Metropolitan district', 'GB-ENG'),
    ('Middlesbrough', 'Unitary authority', 'GB-ENG'),
    ('Medway', 'Unitary authority', 'GB-ENG'),
    ('Mid and East Antrim', 'District', 'GB-NIR'),
    ('Milton Keynes', 'Unitary authority', 'GB-ENG'),
    ('Midlothian', 'Council area', 'GB-SCT'),
    ('Monmouthshire [Sir Fynwy GB-FYN]', 'Unitary authority', 'GB-WLS'),
    ('Merton', 'London borough', 'GB-ENG'),
    ('Moray', 'Council area', 'GB-SCT'),
    ('Merthyr Tydfil [Merthyr Tudful GB-MTU]', 'Unitary authority', 'GB-WLS'),
    ('Mid-Ulster', 'District', 'GB-NIR'),
    ('North Ayrshire', 'Council area', 'GB-SCT'),
    ('Northumberland', 'Unitary authority', 'GB-ENG'),
    ('North East Lincolnshire', 'Unitary authority', 'GB-ENG'),
    ('Newcastle upon Tyne', 'Metropolitan district', 'GB-ENG'),
    ('Norfolk', 'Two-tier county', 'GB-ENG'),
    ('Nottingham', 'Unitary authority', 'GB-ENG'),
    ('Northern Ireland', 'Province', None),
    ('North Lanarkshire', 'Council area', 'GB-SCT'),
    ('North Lincolnshire', 'Unitary authority', 'GB-ENG'),
    ('Newry, Mourne and Down', 'District', 'GB-NIR'),
    ('North Somerset', 'Unitary authority', 'GB-ENG'),
    ('Northamptonshire', 'Two-tier county', 'GB-ENG'),
    ('Neath Port Talbot [Castell-nedd Port Talbot GB-CTL]', 'Unitary authority', 'GB-WLS'),
    ('Nottinghamshire', 'Two-tier county', 'GB-ENG'),
    ('North Tyneside', 'Metropolitan district', 'GB-ENG'),
    ('Newham', 'London borough', 'GB-ENG'),
    ('Newport [Casnewydd GB-CNW]', 'Unitary authority', 'GB-WLS'),
    ('North Yorkshire', 'Two-tier county', 'GB-ENG'),
    ('Oldham', 'Metropolitan district', 'GB-ENG'),
    ('Orkney Islands', 'Council area', 'GB-SCT'),
    ('Oxfordshire', 'Two-tier county', 'GB-ENG'),
    ('Pembrokeshire [Sir Benfro GB-BNF]', 'Unitary authority', 'GB-WLS'),
    ('Perth and Kinross', 'Council area', 'GB-SCT'),
    ('Plymouth', 'Unitary authority', 'GB-ENG'),
    ('Portsmouth', 'Unitary authority', 'GB-ENG'),
    ('Powys', 'Unitary authority', 'GB-WLS'),
    ('Peterborough', 'Unitary authority', 'GB-ENG'),
    ('Redcar and Cleveland', 'Unitary authority', 'GB-ENG'),
    ('Rochdale', 'Metropolitan district', 'GB-ENG'),
    ('Rhondda Cynon Taff [Rhondda CynonTaf]', 'Unitary authority', 'GB-WLS'),
    ('Redbridge', 'London borough', 'GB-ENG'),
    ('Reading', 'Unitary authority', 'GB-ENG'),
    ('Renfrewshire', 'Council area', 'GB-SCT'),
    ('Richmond upon Thames', 'London borough', 'GB-ENG'),
    ('Rotherham', 'Metropolitan district', 'GB-ENG'),
    ('Rutland', 'Unitary authority', 'GB-ENG'),
    ('Sandwell', 'Metropolitan district', 'GB-ENG'),
    ('South Ayrshire', 'Council area', 'GB-SCT'),
    ('Scottish Borders', 'Council area', 'GB-SCT'),
    ('Scotland', 'Country', None),
    ('Suffolk', 'Two-tier county', 'GB-ENG'),
    ('Sefton', 'Metropolitan district', 'GB-ENG'),
    ('South Gloucestershire', 'Unitary authority', 'GB-ENG'),
    ('Sheffield', 'Metropolitan district', 'GB-ENG'),
    ('St. Helens', 'Metropolitan district', 'GB-ENG'),
    ('Shropshire', 'Unitary authority', 'GB-ENG'),
    ('Stockport', 'Metropolitan district', 'GB-ENG'),
    ('Salford', 'Metropolitan district', 'GB-ENG'),
    ('Slough', 'Unitary authority', 'GB-ENG'),
    ('South Lanarkshire', 'Council area', 'GB-SCT'),
    ('Sunderland', 'Metropolitan district', 'GB-ENG'),
    ('Solihull', 'Metropolitan district', 'GB-ENG'),
    ('Somerset', 'Two-tier county', 'GB-ENG'),
    ('Southend-on-Sea', 'Unitary authority', 'GB-ENG'),
    ('Surrey', 'Two-tier county', 'GB-ENG'),
    ('Stoke-on-Trent', 'Unitary authority', 'GB-ENG'),
    ('Stirling', 'Council area', 'GB-SCT'),
    ('Southampton', 'Unitary authority', 'GB-ENG'),
    ('Sutton', 'London borough', 'GB-ENG'),
    ('Staffordshire', 'Two-tier county', 'GB-ENG'),
    ('Stockton-on-Tees', 'Unitary authority', 'GB-ENG'),
    ('South Tyneside', 'Metropolitan district', 'GB-ENG'),
    ('Swansea [Abertawe GB-ATA]', 'Unitary authority', 'GB-WLS'),
    ('Swindon', 'Unitary authority', 'GB-ENG'),
    ('Southwark', 'London borough', 'GB-ENG'),
    ('Tameside', 'Metropolitan district', 'GB-ENG'),
    ('Telford and Wrekin', 'Unitary authority', 'GB-ENG'),
    ('Thurrock', 'Unitary authority', 'GB-ENG'),
    ('Torbay', 'Unitary authority', 'GB-ENG'),
    ('Torfaen [Tor-faen]', 'Unitary authority', 'GB-WLS'),
    ('Trafford', 'Metropolitan district', 'GB-ENG'),
    ('Tower Hamlets', 'London borough', 'GB-ENG'),
    ('Vale of Glamorgan, The [Bro Morgannwg GB-BMG]', 'Unitary authority', 'GB-WLS'),
    ('Warwickshire', 'Two-tier county', 'GB-ENG'),
    ('West Berkshire', 'Unitary authority', 'GB-ENG'),
    ('West Dunbartonshire', 'Council area', 'GB-SCT'),
    ('Waltham Forest', 'London borough', 'GB-ENG'),
    ('Wigan', 'Metropolitan district', 'GB-ENG'),
    ('Wiltshire', 'Unitary authority', 'GB-ENG'),
    ('Wakefield', 'Metropolitan district', 'GB-ENG'),
    ('Walsall', 'Metropolitan district', 'GB-ENG'),
    ('West Lothian', 'Council area', 'GB-SCT'),
    ('Wales [Cymru GB-CYM]', 'Country', None),
    ('Wolverhampton', 'Metropolitan district', 'GB-ENG'),
    ('Wandsworth', 'London borough', 'GB-ENG'),
    ('Windsor and Maidenhead', 'Unitary authority', 'GB-ENG'),
    ('Wokingham', 'Unitary authority', 'GB-ENG'),
    ('Worcestershire', 'Two-tier county', 'GB-ENG'),
    ('Wirral', 'Metropolitan district', 'GB-ENG'),
    ('Warrington', 'Unitary authority', 'GB-ENG'),
    ('Wrexham [Wrecsam GB-WRC]', 'Unitary authority', 'GB-WLS'),
    ('Westminster', 'London borough', 'GB-ENG'),
    ('West Sussex', 'Two-tier county', 'GB-ENG'),
    ('York', 'Unitary authority', 'GB-ENG'),
    ('Shetland Islands', 'Council area', 'GB-SCT'),
    ('Saint Andrew', 'Parish', None),
    ('Saint David', 'Parish', None),
    ('Saint George', 'Parish', None),
    ('Saint John', 'Parish', None),
    ('Saint Mark', 'Parish', None),
    ('Saint Patrick', 'Parish', None),
    ('Southern Grenadine Islands', 'Dependency', None),
    ('Abkhazia', 'Autonomous republic', None),
    ('Ajaria', 'Autonomous republic', None),
    ('Guria', 'Region', None),
    ('Imereti', 'Region', None),
    ("K'akheti", 'Region', None),
    ('Kvemo Kartli', 'Region', None),
    ('Mtskheta-Mtianeti', 'Region', None),
    ("Rach'a-Lechkhumi-Kvemo Svaneti", 'Region', None),
    ('Samtskhe-Javakheti', 'Region', None),
    ('Shida Kartli', 'Region', None),
    ('Samegrelo-Zemo Svaneti', 'Region', None),
    ('Tbilisi', 'City', None),
    ('Greater Accra', 'Region', None),
    ('Ahafo', 'Region', None),
    ('Ashanti', 'Region', None),
    ('Bono East', 'Region', None),
    ('Bono', 'Region', None),
    ('Central', 'Region', None),
    ('Eastern', 'Region', None),
    ('North East', 'Region', None),
    ('Northern', 'Region', None),
    ('Oti', 'Region', None),
    ('Savannah', 'Region', None),
    ('Volta', 'Region', None),
    ('Upper East', 'Region', None),
    ('Upper West', 'Region', None),
    ('Western North', 'Region', None),
    ('Western', 'Region', None),
    ('Avannaata Kommunia', 'Municipality', None),
    ('Kommune Kujalleq', 'Municipality', None),
    ('Qeqqata Kommunia', 'Municipality', None),
    ('Kommune Qeqertalik', 'Municipality', None),
    ('Kommuneqarfik Sermersooq', 'Municipality', None),
    ('Banjul', 'City', None),
    ('Lower River', 'Division', None),
    ('Central River', 'Division', None),
    ('North Bank', 'Division', None),
    ('Upper River', 'Division', None),
    ('Western', 'Division', None),
    ('Boké', 'Administrative region', None),
    ('Beyla', 'Prefecture', 'GN-N'),
    ('Boffa', 'Prefecture', 'GN-B'),
    ('Boké', 'Prefecture', 'GN-B'),
    ('Conakry', 'Governorate', None),
    ('Coyah', 'Prefecture', 'GN-D'),
    ('Kindia', 'Administrative region', None),
    ('Dabola', 'Prefecture', 'GN-F'),
    ('Dinguiraye', 'Prefecture', 'GN-F'),
    ('Dalaba', 'Prefecture', 'GN-M'),
    ('Dubréka', 'Prefecture', 'GN-D'),
    ('Faranah', 'Administrative region', None),
    ('Faranah', 'Prefecture', 'GN-F'),
    ('Forécariah', 'Prefecture', 'GN-D'),
    ('Fria', 'Prefecture', 'GN-B'),
    ('Gaoual', 'Prefecture', 'GN-B'),
    ('Guékédou', 'Prefecture', 'GN-N'),
    ('Kankan', 'Administrative region', None),
    ('Kankan', 'Prefecture', 'GN-K'),
    ('Koubia', 'Prefecture', 'GN-L'),
    ('Kindia', 'Prefecture', 'GN-D'),
    ('Kérouané', 'Prefecture', 'GN-K'),
    ('Koundara', 'Prefecture', 'GN-B'),
    ('Kouroussa', 'Prefecture', 'GN-K'),
    ('Kissidougou', 'Prefecture', 'GN-F'),
    ('Labé', 'Administrative region', None),
    ('Labé', 'Prefecture', 'GN-L'),
    ('Lélouma', 'Prefecture', 'GN-L'),
    ('Lola', 'Prefecture', 'GN-N'),
    ('Mamou', 'Administrative region', None),
    ('Macenta', 'Prefecture', 'GN-N'),
    ('Mandiana', 'Prefecture', 'GN-K'),
    ('Mali', 'Prefecture', 'GN-L'),
    ('Mamou', 'Prefecture', 'GN-M'),
    ('Nzérékoré', 'Administrative region', None),
    ('Nzérékoré', 'Prefecture', 'GN-N'),
    ('Pita', 'Prefecture', 'GN-M'),
    ('Siguiri', 'Prefecture', 'GN-K'),
    ('Télimélé', 'Prefecture', 'GN-D'),
    ('Tougué', 'Prefecture', 'GN-L'),
    ('Yomou', 'Prefecture', 'GN-N'),
    ('Annobon', 'Province', 'GQ-I'),
    ('Bioko Nord', 'Province', 'GQ-I'),
    ('Bioko Sud', 'Province', 'GQ-I'),
    ('Região Continental', 'Region', None),
    ('Centro Sud', 'Province', 'GQ-C'),
    ('Djibloho', 'Province', 'GQ-C'),
    ('Região Insular', 'Region', None),
    ('Kié-Ntem', 'Province', 'GQ-C'),
    ('Litoral', 'Province', 'GQ-C'),
    ('Wele-Nzas', 'Province', 'GQ-C'),
    ('Ágion Óros', 'Self-governed part', None),
    ('Anatolikí Makedonía kai Thráki', 'Administrative region', None),
    ('Kentrikí Makedonía', 'Administrative region', None),
    ('Dytikí Makedonía', 'Administrative region', None),
    ('Ípeiros', 'Administrative region', None),
    ('Thessalía', 'Administrative region', None),
    ('Ionía Nísia', 'Administrative region', None),
    ('Dytikí Elláda', 'Administrative region', None),
    ('Stereá Elláda', 'Administrative region', None),
    ('Attikí', 'Administrative region', None),
    ('Pelopónnisos', 'Administrative region', None),
    ('Vóreio Aigaío', 'Administrative region', None),
    ('Nótio Aigaío', 'Administrative region', None),
    ('Kríti', 'Administrative region', None),
    ('Alta Verapaz', 'Department', None),
    ('Baja Verapaz', 'Department', None),
    ('Chimaltenango', 'Department', None),
    ('Chiquimula', 'Department', None),
    ('Escuintla', 'Department', None),
    ('Guatemala', 'Department', None),
    ('Huehuetenango', 'Department', None),
    ('Izabal', 'Department', None),
    ('Jalapa', 'Department', None),
    ('Jutiapa', 'Department', None),
    ('Petén', 'Department', None),
    ('El Progreso', 'Department', None),
    ('Quiché', 'Department', None),
    ('Quetzaltenango', 'Department', None),
    ('Retalhuleu', 'Department', None),
    ('Sacatepéquez', 'Department', None),
    ('San Marcos', 'Department', None),
    ('Sololá', 'Department', None),
    ('Santa Rosa', 'Department', None),
    ('Suchitepéquez', 'Department', None),
    ('Totonicapán', 'Department', None),
    ('Zacapa', 'Department', None),
    ('Bafatá', 'Region', 'GW-L'),
    ('Bolama / Bijagós', 'Region', 'GW-S'),
    ('Biombo', 'Region', 'GW-N'),
    ('Bissau', 'Autonomous sector', None),
    ('Cacheu', 'Region', 'GW-N'),
    ('Gabú', 'Region', 'GW-L'),
    ('Leste', 'Province', None),
    ('Norte', 'Province', None),
    ('Oio', 'Region', 'GW-N'),
    ('Quinara', 'Region', 'GW-S'),
    ('Sul', 'Province', None),
    ('Tombali', 'Region', 'GW-S'),
    ('Barima-Waini', 'Region', None),
    ('Cuyuni-Mazaruni', 'Region', None),
    ('Demerara-Mahaica', 'Region', None),
    ('East Berbice-Corentyne', 'Region', None),
    ('Essequibo Islands-West Demerara', 'Region', None),
    ('Mahaica-Berbice', 'Region', None),
    ('Pomeroon-Supenaam', 'Region', None),
    ('Potaro-Siparuni', 'Region', None),
    ('Upper Demerara-Berbice', 'Region', None),
    ('Upper Takutu-Upper Essequibo', 'Region', None),
    ('Atlántida', 'Department', None),
    ('Choluteca', 'Department', None),
    ('Colón', 'Department', None),
    ('Comayagua', 'Department', None),
    ('Copán', 'Department', None),
    ('Cortés', 'Department', None),
    ('El Paraíso', 'Department', None),
    ('Francisco Morazán', 'Department', None),
    ('Gracias a Dios', 'Department', None),
    ('Islas de la Bahía', 'Department', None),
    ('Intibucá', 'Department', None),
    ('Lempira', 'Department', None),
    ('La Paz', 'Department', None),
    ('Ocotepeque', 'Department', None),
    ('Olancho', 'Department', None),
    ('Santa Bárbara', 'Department', None),
    ('Valle', 'Department', None),
    ('Yoro', 'Department', None),
    ('Zagrebačka županija', 'County', None),
    ('Krapinsko-zagorska županija', 'County', None),
    ('Sisačko-moslavačka županija', 'County', None),
    ('Karlovačka županija', 'County', None),
    ('Varaždinska županija', 'County', None),
    ('Koprivničko-križevačka županija', 'County', None),
    ('Bjelovarsko-bilogorska županija', 'County', None),
    ('Primorsko-goranska županija', 'County', None),
    ('Ličko-senjska županija', 'County', None),
    ('Virovitičko-podravska županija', 'County', None),
    ('Požeško-slavonska županija', 'County', None),
    ('Brodsko-posavska županija', 'County', None),
    ('Zadarska županija', 'County', None),
    ('Osječko-baranjska županija', 'County', None),
    ('Šibensko-kninska županija', 'County', None),
    ('Vukovarsko-srijemska županija', 'County', None),
    ('Splitsko-dalmatinska županija', 'County', None),
    ('Istarska županija', 'County', None),
    ('Dubrovačko-neretvanska županija', 'County', None),
    ('Međimurska županija', 'County', None),
    ('Grad Zagreb', 'City', None),
    ('Artibonite', 'Department', None),
    ('Centre', 'Department', None),
    ('Grandans', 'Department', None),
    ('Nord', 'Department', None),
    ('Nord-Est', 'Department', None),
    ('Nip', 'Department', None),
    ('Nord-Ouest', 'Department', None),
    ('Lwès', 'Department', None),
    ('Sid', 'Department', None),
    ('Sidès', 'Department', None),
    ('Baranya', 'County', None),
    ('Békéscsaba', 'City with county rights', None),
    ('Békés', 'County', None),
    ('Bács-Kiskun', 'County', None),
    ('Budapest', 'Capital city', None),
    ('Borsod-Abaúj-Zemplén', 'County', None),
    ('Csongrád', 'County', None),
    ('Debrecen', 'City with county rights', None),
    ('Dunaújváros', 'City with county rights', None),
    ('Eger', 'City with county rights', None),
    ('Érd', 'City with county rights', None),
    ('Fejér', 'County', None),
    ('Győr-Moson-Sopron', 'County', None),
    ('Győr', 'City with county rights', None),
    ('Hajdú-Bihar', 'County', None),
    ('Heves', 'County', None),
    ('Hódmezővásárhely', 'City with county rights', None),
    ('Jász-Nagykun-Szolnok', 'County', None),
    ('Komárom-Esztergom', 'County', None),
    ('Kecskemét', 'City with county rights', None),
    ('Kaposvár', 'City with county rights', None),
    ('Miskolc', 'City with county rights', None),
    ('Nagykanizsa', 'City with county rights', None),
    ('Nógrád', 'County', None),
    ('Nyíregyháza', 'City with county rights', None),
    ('Pest', 'County', None),
    ('Pécs', 'City with county rights', None),
    ('Szeged', 'City with county rights', None),
    ('Székesfehérvár', 'City with county rights', None),
    ('Szombathely', 'City with county rights', None),
    ('Szolnok', 'City with county rights', None),
    ('Sopron', 'City with county rights', None),
    ('Somogy', 'County', None),
    ('Szekszárd', 'City with county rights', None),
    ('Salgótarján', 'City with county rights', None),
    ('Szabolcs-Szatmár-Bereg', 'County', None),
    ('Tatabánya', 'City with county rights', None),
    ('Tolna', 'County', None),
    ('Vas', 'County', None),
    ('Veszprém', 'County', None),
    ('Veszprém', 'City with county rights', None),
    ('Zala', 'County', None),
    ('Zalaegerszeg', 'City with county rights', None),
    ('Aceh', 'Province', 'ID-SM'),
    ('Bali', 'Province', 'ID-NU'),
    ('Kepulauan Bangka Belitung', 'Province', 'ID-SM'),
    ('Bengkulu', 'Province', 'ID-SM'),
    ('Banten', 'Province', 'ID-JW'),
    ('Gorontalo', 'Province', 'ID-SL'),
    ('Jambi', 'Province', 'ID-SM'),
    ('Jawa Barat', 'Province', 'ID-JW'),
    ('Jawa Timur', 'Province', 'ID-JW'),
    ('Jakarta Raya', 'Capital district', 'ID-JW'),
    ('Jawa Tengah', 'Province', 'ID-JW'),
    ('Jawa', 'Geographical unit', None),
    ('Kalimantan', 'Geographical unit', None),
    ('Kalimantan Barat', 'Province', 'ID-KA'),
    ('Kalimantan Timur', 'Province', 'ID-KA'),
    ('Kepulauan Riau', 'Province', 'ID-SM'),
    ('Kalimantan Selatan', 'Province', 'ID-KA'),
    ('Kalimantan Tengah', 'Province', 'ID-KA'),
    ('Kalimantan Utara', 'Province', 'ID-KA'),
    ('Lampung', 'Province', 'ID-SM'),
    ('Maluku', 'Province', 'ID-ML'),
    ('Maluku', 'Geographical unit', None),
    ('Maluku Utara', 'Province', 'ID-ML'),
    ('Nusa Tenggara Barat', 'Province', 'ID-NU'),
    ('Nusa Tenggara Timur', 'Province', 'ID-NU'),
    ('Nusa Tenggara', 'Geographical unit', None),
    ('Papua', 'Province', 'ID-PP'),
    ('Papua Barat', 'Province', 'ID-PP'),
    ('Papua', 'Geographical unit', None),
    ('Riau', 'Province', 'ID-SM'),
    ('Sulawesi Utara', 'Province', 'ID-SL'),
    ('Sumatera Barat', 'Province', 'ID-SM'),
    ('Sulawesi Tenggara', 'Province', 'ID-SL'),
    ('Sulawesi', 'Geographical unit', None),
    ('Sumatera', 'Geographical unit', None),
    ('Sulawesi Selatan', 'Province', 'ID-SL'),
    ('Sulawesi Barat', 'Province', 'ID-SL'),
    ('Sumatera Selatan', 'Province', 'ID-SM'),
    ('Sulawesi Tengah', 'Province', 'ID-SL'),
    ('Sumatera Utara', 'Province', 'ID-SM'),
    ('Yogyakarta', 'Special region', 'ID-JW'),
    ('Connaught', 'Province', None),
    ('Clare', 'County', 'IE-M'),
    ('Cavan', 'County', 'IE-U'),
    ('Cork', 'County', 'IE-M'),
    ('Carlow', 'County', 'IE-L'),
    ('Dublin', 'County', 'IE-L'),
    ('Donegal', 'County', 'IE-U'),
    ('Galway', 'County', 'IE-C'),
    ('Kildare', 'County', 'IE-L'),
    ('Kilkenny', 'County', 'IE-L'),
    ('Kerry', 'County', 'IE-M'),
    ('Leinster', 'Province', None),
    ('Longford', 'County', 'IE-L'),
    ('Louth', 'County', 'IE-L'),
    ('Limerick', 'County', 'IE-M'),
    ('Leitrim', 'County', 'IE-C'),
    ('Laois', 'County', 'IE-L'),
    ('Munster', 'Province', None),
    ('Meath', 'County', 'IE-L'),
    ('Monaghan', 'County', 'IE-U'),
    ('Mayo', 'County', 'IE-C'),
    ('Offaly', 'County', 'IE-L'),
    ('Roscommon', 'County', 'IE-C'),
    ('Sligo', 'County', 'IE-C'),
    ('Tipperary', 'County', 'IE-M'),
    ('Ulster', 'Province', None),
    ('Waterford', 'County', 'IE-M'),
    ('Westmeath', 'County', 'IE-L'),
    ('Wicklow', 'County', 'IE-L'),
    ('Wexford', 'County', 'IE-L'),
    ('Al Janūbī', 'District', None),
    ('H̱efa', 'District', None),
    ('Al Quds', 'District', None),
    ('Al Awsaţ', 'District', None),
    ('Tall Abīb', 'District', None),
    ('Ash Shamālī', 'District', None),
    ('Andaman and Nicobar Islands', 'Union territory', None),
    ('Andhra Pradesh', 'State', None),
    ('Arunāchal Pradesh', 'State', None),
    ('Assam', 'State', None),
    ('Bihār', 'State', None),
    ('Chandīgarh', 'Union territory', None),
    ('Chhattīsgarh', 'State', None),
    ('Dādra and Nagar Haveli and Damān and Diu', 'Union territory', None),
    ('Delhi', 'Union territory', None),
    ('Goa', 'State', None),
    ('Gujarāt', 'State', None),
    ('Himāchal Pradesh', 'State', None),
    ('Haryāna', 'State', None),
    ('Jhārkhand', 'State', None),
    ('Jammu and Kashmīr', 'Union territory', None),
    ('Karnātaka', 'State', None),
    ('Kerala', 'State', None),
    ('Ladākh', 'Union territory', None),
    ('Lakshadweep', 'Union territory', None),
    ('Mahārāshtra', 'State', None),
    ('Meghālaya', 'State', None),
    ('Manipur', 'State', None),
    ('Madhya Pradesh', 'State', None),
    ('Mizoram', 'State', None),
    ('Nāgāland', 'State', None),
    ('Odisha', 'State', None),
    ('Punjab', 'State', None),
    ('Puducherry', 'Union territory', None),
    ('Rājasthān', 'State', None),
    ('Sikkim', 'State', None),
    ('Telangāna', 'State', None),
    ('Tamil Nādu', 'State', None),
    ('Tripura', 'State', None),
    ('Uttar Pradesh', 'State', None),
    ('Uttarākhand', 'State', None),
    ('West Bengal', 'State', None),
    ('Al Anbār', 'Governorate', None),
    ('Arbīl', 'Governorate', None),
    ('Al Başrah', 'Governorate', None),
    ('Bābil', 'Governorate', None),
    ('Baghdād', 'Governorate', None),
    ('Dahūk', 'Governorate', None),
    ('Diyālá', 'Governorate', None),
    ('Dhī Qār', 'Governorate', None),
    ('Karbalā’', 'Governorate', None),
    ('Kirkūk', 'Governorate', None),
    ('Maysān', 'Governorate', None),
    ('Al Muthanná', 'Governorate', None),
    ('An Najaf', 'Governorate', None),
    ('Nīnawá', 'Governorate', None),
    ('Al Qādisīyah', 'Governorate', None),
    ('Şalāḩ ad Dīn', 'Governorate', None),
    ('As Sulaymānīyah', 'Governorate', None),
    ('Wāsiţ', 'Governorate', None),
    ('Markazī', 'Province', None),
    ('Gīlān', 'Province', None),
    ('Māzandarān', 'Province', None),
    ('Āz̄ārbāyjān-e Shārqī', 'Province', None),
    ('Āz̄ārbāyjān-e Ghārbī', 'Province', None),
    ('Kermānshāh', 'Province', None),
    ('Khūzestān', 'Province', None),
    ('Fārs', 'Province', None),
    ('Kermān', 'Province', None),
    ('Khorāsān-e Raẕavī', 'Province', None),
    ('Eşfahān', 'Province', None),
    ('Sīstān va Balūchestān', 'Province', None),
    ('Kordestān', 'Province', None),
    ('Hamadān', 'Province', None),
    ('Chahār Maḩāl va Bakhtīārī', 'Province', None),
    ('Lorestān', 'Province', None),
    ('Īlām', 'Province', None),
    ('Kohgīlūyeh va Bowyer Aḩmad', 'Province', None),
    ('Būshehr', 'Province', None),
    ('Zanjān', 'Province', None),
    ('Semnān', 'Province', None),
    ('Yazd', 'Province', None),
    ('Hormozgān', 'Province', None),
    ('Tehrān', 'Province', None),
    ('Ardabīl', 'Province', None),
    ('Qom', 'Province', None),
    ('Qazvīn', 'Province', None),
    ('Golestān', 'Province', None),
    ('Khorāsān-e Shomālī', 'Province', None),
    ('Khorāsān-e Jonūbī', 'Province', None),
    ('Alborz', 'Province', None),
    ('Höfuðborgarsvæði', 'Region', None),
    ('Suðurnes', 'Region', None),
    ('Vesturland', 'Region', None),
    ('Vestfirðir', 'Region', None),
    ('Norðurland vestra', 'Region', None),
    ('Norðurland eystra', 'Region', None),
    ('Austurland', 'Region', None),
    ('Suðurland', 'Region', None),
    ('Akrahreppur', 'Municipality', 'IS-5'),
    ('Akraneskaupstaður', 'Municipality', 'IS-3'),
    ('Akureyrarbær', 'Municipality', 'IS-6'),
    ('Árneshreppur', 'Municipality', 'IS-4'),
    ('Ásahreppur', 'Municipality', 'IS-8'),
    ('Borgarfjarðarhreppur', 'Municipality', 'IS-7'),
    ('Bláskógabyggð', 'Municipality', 'IS-8'),
    ('Blönduósbær', 'Municipality', 'IS-5'),
    ('Borgarbyggð', 'Municipality', 'IS-3'),
    ('Bolungarvíkurkaupstaður', 'Municipality', 'IS-4'),
    ('Dalabyggð', 'Municipality', 'IS-3'),
    ('Dalvíkurbyggð', 'Municipality', 'IS-6'),
    ('Djúpavogshreppur', 'Municipality', 'IS-7'),
    ('Eyja- og Miklaholtshreppur', 'Municipality', 'IS-3'),
    ('Eyjafjarðarsveit', 'Municipality', 'IS-6'),
    ('Fjarðabyggð', 'Municipality', 'IS-7'),
    ('Fjallabyggð', 'Municipality', 'IS-6'),
    ('Flóahreppur', 'Municipality', 'IS-8'),
    ('Fljótsdalshérað', 'Municipality', 'IS-7'),
    ('Fljótsdalshreppur', 'Municipality', 'IS-7'),
    ('Garðabær', 'Municipality', 'IS-1'),
    ('Grímsnes- og Grafningshreppur', 'Municipality', 'IS-8'),
    ('Grindavíkurbær', 'Municipality', 'IS-2'),
    ('Grundarfjarðarbær', 'Municipality', 'IS-3'),
    ('Grýtubakkahreppur', 'Municipality', 'IS-6'),
    ('Hafnarfjarðarkaupstaður', 'Municipality', 'IS-1'),
    ('Helgafellssveit', 'Municipality', 'IS-3'),
    ('Hörgársveit', 'Municipality', 'IS-6'),
    ('Hrunamannahreppur', 'Municipality', 'IS-8'),
    ('Húnavatnshreppur', 'Municipality', 'IS-5'),
    ('Húnaþing vestra', 'Municipality', 'IS-5'),
    ('Hvalfjarðarsveit', 'Municipality', 'IS-3'),
    ('Hveragerðisbær', 'Municipality', 'IS-8'),
    ('Ísafjarðarbær', 'Municipality', 'IS-4'),
    ('Kaldrananeshreppur', 'Municipality', 'IS-4'),
    ('Kjósarhreppur', 'Municipality', 'IS-1'),
    ('Kópavogsbær', 'Municipality', 'IS-1'),
    ('Langanesbyggð', 'Municipality', 'IS-6'),
    ('Mosfellsbær', 'Municipality', 'IS-1'),
    ('Mýrdalshreppur', 'Municipality', 'IS-8'),
    ('Norðurþing', 'Municipality', 'IS-6'),
    ('Rangárþing eystra', 'Municipality', 'IS-8'),
    ('Rangárþing ytra', 'Municipality', 'IS-8'),
    ('Reykhólahreppur', 'Municipality', 'IS-4'),
    ('Reykjanesbær', 'Municipality', 'IS-2'),
    ('Reykjavíkurborg', 'Municipality', 'IS-1'),
    ('Svalbarðshreppur', 'Municipality', 'IS-6'),
    ('Svalbarðsstrandarhreppur', 'Municipality', 'IS-6'),
    ('Suðurnesjabær', 'Municipality', 'IS-2'),
    ('Súðavíkurhreppur', 'Municipality', 'IS-4'),
    ('Seltjarnarnesbær', 'Municipality', 'IS-1'),
    ('Seyðisfjarðarkaupstaður', 'Municipality', 'IS-7'),
    ('Sveitarfélagið Árborg', 'Municipality', 'IS-8'),
    ('Sveitarfélagið Hornafjörður', 'Municipality', 'IS-7'),
    ('Skaftárhreppur', 'Municipality', 'IS-8'),
    ('Skagabyggð', 'Municipality', 'IS-5'),
    ('Skorradalshreppur', 'Municipality', 'IS-3'),
    ('Skútustaðahreppur', 'Municipality', 'IS-6'),
    ('Snæfellsbær', 'Municipality', 'IS-3'),
    ('Skeiða- og Gnúpverjahreppur', 'Municipality', 'IS-8'),
    ('Sveitarfélagið Ölfus', 'Municipality', 'IS-8'),
    ('Sveitarfélagið Skagafjörður', 'Municipality', 'IS-5'),
    ('Sveitarfélagið Skagaströnd', 'Municipality', 'IS-5'),
    ('Strandabyggð', 'Municipality', 'IS-4'),
    ('Stykkishólmsbær', 'Municipality', 'IS-3'),
    ('Sveitarfélagið Vogar', 'Municipality', 'IS-2'),
    ('Tálknafjarðarhreppur', 'Municipality', 'IS-4'),
    ('Þingeyjarsveit', 'Municipality', 'IS-6'),
    ('Tjörneshreppur', 'Municipality', 'IS-6'),
    ('Vestmannaeyjabær', 'Municipality', 'IS-8'),
    ('Vesturbyggð', 'Municipality', 'IS-4'),
    ('Vopnafjarðarhreppur', 'Municipality', 'IS-7'),
    ('Piemonte', 'Region', None),
    ("Val d'Aoste", 'Autonomous region', None),
    ('Lombardia', 'Region', None),
    ('Trentino-Alto Adige', 'Autonomous region', None),
    ('Veneto', 'Region', None),
    ('Friuli Venezia Giulia', 'Autonomous region', None),
    ('Liguria', 'Region', None),
    ('Emilia-Romagna', 'Region', None),
    ('Toscana', 'Region', None),
    ('Umbria', 'Region', None),
    ('Marche', 'Region', None),
    ('Lazio', 'Region', None),
    ('Abruzzo', 'Region', None),
    ('Molise', 'Region', None),
    ('Campania', 'Region', None),
    ('Puglia', 'Region', None),
    ('Basilicata', 'Region', None),
    ('Calabria', 'Region', None),
    ('Sicilia', 'Autonomous region', None),
    ('Sardegna', 'Autonomous region', None),
    ('Agrigento', 'Free municipal consortium', 'IT-82'),
    ('Alessandria', 'Province', 'IT-21'),
    ('Ancona', 'Province', 'IT-57'),
    ('Ascoli Piceno', 'Province', 'IT-57'),
    ("L'Aquila", 'Province', 'IT-65'),
    ('Arezzo', 'Province', 'IT-52'),
    ('Asti', 'Province', 'IT-21'),
    ('Avellino', 'Province', 'IT-72'),
    ('Bari', 'Metropolitan city', 'IT-75'),
    ('Bergamo', 'Province', 'IT-25'),
    ('Biella', 'Province', 'IT-21'),
    ('Belluno', 'Province', 'IT-34'),
    ('Benevento', 'Province', 'IT-72'),
    ('Bologna', 'Metropolitan city', 'IT-45'),
    ('Brindisi', 'Province', 'IT-75'),
    ('Brescia', 'Province', 'IT-25'),
    ('Barletta-Andria-Trani', 'Province', 'IT-75'),
    ('Bolzano', 'Autonomous province', 'IT-32'),
    ('Cagliari', 'Metropolitan city', 'IT-88'),
    ('Campobasso', 'Province', 'IT-67'),
    ('Caserta', 'Province', 'IT-72'),
    ('Chieti', 'Province', 'IT-65'),
    ('Caltanissetta', 'Free municipal consortium', 'IT-82'),
    ('Cuneo', 'Province', 'IT-21'),
    ('Como', 'Province', 'IT-25'),
    ('Cremona', 'Province', 'IT-25'),
    ('Cosenza', 'Province', 'IT-78'),
    ('Catania', 'Metropolitan city', 'IT-82'),
    ('Catanzaro', 'Province', 'IT-78'),
    ('Enna', 'Free municipal consortium', 'IT-82'),
    ('Forlì-Cesena', 'Province', 'IT-45'),
    ('Ferrara', 'Province', 'IT-45'),
    ('Foggia', 'Province', 'IT-75'),
    ('Firenze', 'Metropolitan city', 'IT-52'),
    ('Fermo', 'Province', 'IT-57'),
    ('Frosinone', 'Province', 'IT-62'),
    ('Genova', 'Metropolitan city', 'IT-42'),
    ('Gorizia', 'Decentralized regional entity', 'IT-36'),
    ('Grosseto', 'Province', 'IT-52'),
    ('Imperia', 'Province', 'IT-42'),
    ('Isernia', 'Province', 'IT-67'),
    ('Crotone', 'Province', 'IT-78'),
    ('Lecco', 'Province', 'IT-25'),
    ('Lecce', 'Province', 'IT-75'),
    ('Livorno', 'Province', 'IT-52'),
    ('Lodi', 'Province', 'IT-25'),
    ('Latina', 'Province', 'IT-62'),
    ('Lucca', 'Province', 'IT-52'),
    ('Monza e Brianza', 'Province', 'IT-25'),
    ('Macerata', 'Province', 'IT-57'),
    ('Messina', 'Metropolitan city', 'IT-82'),
    ('Milano', 'Metropolitan city', 'IT-25'),
    ('Mantova', 'Province', 'IT-25'),
    ('Modena', 'Province', 'IT-45'),
    ('Massa-Carrara', 'Province', 'IT-52'),
    ('Matera', 'Province', 'IT-77'),
    ('Napoli', 'Metropolitan city', 'IT-72'),
    ('Novara', 'Province', 'IT-21'),
    ('Nuoro', 'Province', 'IT-88'),
    ('Oristano', 'Province', 'IT-88'),
    ('Palermo', 'Metropolitan city', 'IT-82'),
    ('Piacenza', 'Province', 'IT-45'),
    ('Padova', 'Province', 'IT-34'),
    ('Pescara', 'Province', 'IT-65'),
    ('Perugia', 'Province', 'IT-55'),
    ('Pisa', 'Province', 'IT-52'),
    ('Pordenone', 'Decentralized regional entity', 'IT-36'),
    ('Prato', 'Province', 'IT-52'),
    ('Parma', 'Province', 'IT-45'),
    ('Pistoia', 'Province', 'IT-52'),
    ('Pesaro e Urbino', 'Province', 'IT-57'),
    ('Pavia', 'Province', 'IT-25'),
    ('Potenza', 'Province', 'IT-77'),
    ('Ravenna', 'Province', 'IT-45'),
    ('Reggio Calabria', 'Metropolitan city', 'IT-78'),
    ('Reggio Emilia', 'Province', 'IT-45'),
    ('Ragusa', 'Free municipal consortium', 'IT-82'),
    ('Rieti', 'Province', 'IT-62'),
    ('Roma', 'Metropolitan city', 'IT-62'),
    ('Rimini', 'Province', 'IT-45'),
    ('Rovigo', 'Province', 'IT-34'),
    ('Salerno', 'Province', 'IT-72'),
    ('Siena', 'Province', 'IT-52'),
    ('Sondrio', 'Province', 'IT-25'),
    ('La Spezia', 'Province', 'IT-42'),
    ('Siracusa', 'Free municipal consortium', 'IT-82'),
    ('Sassari', 'Province', 'IT-88'),
    ('Sud Sardegna', 'Province', 'IT-88'),
    ('Savona', 'Province', 'IT-42'),
    ('Taranto', 'Province', 'IT-75'),
    ('Teramo', 'Province', 'IT-65'),
    ('Trento', 'Autonomous province', 'IT-32'),
    ('Torino', 'Metropolitan city', 'IT-21'),
    ('Trapani', 'Free municipal consortium', 'IT-82'),
    ('Terni', 'Province', 'IT-55'),
    ('Trieste', 'Decentralized regional entity', 'IT-36'),
    ('Treviso', 'Province', 'IT-34'),
    ('Udine', 'Decentralized regional entity', 'IT-36'),
    ('Varese', 'Province', 'IT-25'),
    ('Verbano-Cusio-Ossola', 'Province', 'IT-21'),
    ('Vercelli', 'Province', 'IT-21'),
    ('Venezia', 'Metropolitan city', 'IT-34'),
    ('Vicenza', 'Province', 'IT-34'),
    ('Verona', 'Province', 'IT-34'),
    ('Viterbo', 'Province', 'IT-62'),
    ('Vibo Valentia', 'Province', 'IT-78'),
    ('Kingston', 'Parish', None),
    ('Saint Andrew', 'Parish', None),
    ('Saint Thomas', 'Parish', None),
    ('Portland', 'Parish', None),
    ('Saint Mary', 'Parish', None),
    ('Saint Ann', 'Parish', None),
    ('Trelawny', 'Parish', None),
    ('Saint James', 'Parish', None),
    ('Hanover', 'Parish', None),
    ('Westmoreland', 'Parish', None),
    ('Saint Elizabeth', 'Parish', None),
    ('Manchester', 'Parish', None),
    ('Clarendon', 'Parish', None),
    ('Saint Catherine', 'Parish', None),
    ('‘Ajlūn', 'Governorate', None),
    ('Al ‘A̅şimah', 'Governorate', None),
    ('Al ‘Aqabah', 'Governorate', None),
    ('Aţ Ţafīlah', 'Governorate', None),
    ('Az Zarqā’', 'Governorate', None),
    ('Al Balqā’', 'Governorate', None),
    ('Irbid', 'Governorate', None),
    ('Jarash', 'Governorate', None),
    ('Al Karak', 'Governorate', None),
    ('Al Mafraq', 'Governorate', None),
    ('Mādabā', 'Governorate', None),
    ('Ma‘ān', 'Governorate', None),
    ('Hokkaido', 'Prefecture', None),
    ('Aomori', 'Prefecture', None),
    ('Iwate', 'Prefecture', None),
    ('Miyagi', 'Prefecture', None),
    ('Akita', 'Prefecture', None),
    ('Yamagata', 'Prefecture', None),
    ('Fukushima', 'Prefecture', None),
    ('Ibaraki', 'Prefecture', None),
    ('Tochigi', 'Prefecture', None),
    ('Gunma', 'Prefecture', None),
    ('Saitama', 'Prefecture', None),
    ('Chiba', 'Prefecture', None),
    ('Tokyo', 'Prefecture', None),
    ('Kanagawa', 'Prefecture', None),
    ('Niigata', 'Prefecture', None),
    ('Toyama', 'Prefecture', None),
    ('Ishikawa', 'Prefecture', None),
    ('Fukui', 'Prefecture', None),
    ('Yamanashi', 'Prefecture', None),
    ('Nagano', 'Prefecture', None),
    ('Gifu', 'Prefecture', None),
    ('Shizuoka', 'Prefecture', None),
    ('Aichi', 'Prefecture', None),
    ('Mie', 'Prefecture', None),
    ('Shiga', 'Prefecture', None),
    ('Kyoto', 'Prefecture', None),
    ('Osaka', 'Prefecture', None),
    ('Hyogo', 'Prefecture', None),
    ('Nara', 'Prefecture', None),
    ('Wakayama', 'Prefecture', None),
    ('Tottori', 'Prefecture', None),
    ('Shimane', 'Prefecture', None),
    ('Okayama', 'Prefecture', None),
    ('Hiroshima', 'Prefecture', None),
    ('Yamaguchi', 'Prefecture', None),
    ('Tokushima', 'Prefecture', None),
    ('Kagawa', 'Prefecture', None),
    ('Ehime', 'Prefecture', None),
    ('Kochi', 'Prefecture', None),
    ('Fukuoka', 'Prefecture', None),
    ('Saga', 'Prefecture', None),
    ('Nagasaki', 'Prefecture', None),
    ('Kumamoto', 'Prefecture', None),
    ('Oita', 'Prefecture', None),
    ('Miyazaki', 'Prefecture', None),
    ('Kagoshima', 'Prefecture', None),
    ('Okinawa', 'Prefecture', None),
    ('Baringo', 'County', None),
    ('Bomet', 'County', None),
    ('Bungoma', 'County', None),
    ('Busia', 'County', None),
    ('Elgeyo/Marakwet', 'County', None),
    ('Embu', 'County', None),
    ('Garissa', 'County', None),
    ('Homa Bay', 'County', None),
    ('Isiolo', 'County', None),
    ('Kajiado', 'County', None),
    ('Kakamega', 'County', None),
    ('Kericho', 'County', None),
    ('Kiambu', 'County', None),
    ('Kilifi', 'County', None),
    ('Kirinyaga', 'County', None),
    ('Kisii', 'County', None),
    ('Kisumu', 'County', None),
    ('Kitui', 'County', None),
    ('Kwale', 'County', None),
    ('Laikipia', 'County', None),
    ('Lamu', 'County', None),
    ('Machakos', 'County', None),
    ('Makueni', 'County', None),
    ('Mandera', 'County', None),
    ('Marsabit', 'County', None),
    ('Meru', 'County', None),
    ('Migori', 'County', None),
    ('Mombasa', 'County', None),
    ("Murang'a", 'County', None),
    ('Nairobi City', 'County', None),
    ('Nakuru', 'County', None),
    ('Nandi', 'County', None),
    ('Narok', 'County', None),
    ('Nyamira', 'County', None),
    ('Nyandarua', 'County', None),
    ('Nyeri', 'County', None),
    ('Samburu', 'County', None),
    ('Siaya', 'County', None),
    ('Taita/Taveta', 'County', None),
    ('Tana River', 'County', None),
    ('Tharaka-Nithi', 'County', None),
    ('Trans Nzoia', 'County', None),
    ('Turkana', 'County', None),
    ('Uasin Gishu', 'County', None),
    ('Vihiga', 'County', None),
    ('Wajir', 'County', None),
    ('West Pokot', 'County', None),
    ('Batken', 'Region', None),
    ("Chuyskaya oblast'", 'Region', None),
    ('Bishkek Shaary', 'City', None),
    ('Gorod Osh', 'City', None),
    ("Dzhalal-Abadskaya oblast'", 'Region', None),
    ('Naryn', 'Region', None),
    ('Osh', 'Region', None),
    ('Talas', 'Region', None),
    ("Issyk-Kul'skaja oblast'", 'Region', None),
    ('Banteay Mean Choăy', 'Province', None),
    ('Kracheh', 'Province', None),
    ('Mondol Kiri', 'Province', None),
    ('Phnom Penh', 'Autonomous municipality', None),
    ('Preah Vihear', 'Province', None),
    ('Prey Veaeng', 'Province', None),
    ('Pousaat', 'Province', None),
    ('Rotanak Kiri', 'Province', None),
    ('Siem Reab', 'Province', None),
    ('Preah Sihanouk', 'Province', None),
    ('Stoĕng Trêng', 'Province', None),
    ('Baat Dambang', 'Province', None),
    ('Svaay Rieng', 'Province', None),
    ('Taakaev', 'Province', None),
    ('Otdar Mean Chey', 'Province', None),
    ('Kaeb', 'Province', None),
    ('Pailin', 'Province', None),
    ('Tbong Khmum', 'Province', None),
    ('Kampong Chaam', 'Province', None),
    ('Kampong Chhnang', 'Province', None),
    ('Kampong Spueu', 'Province', None),
    ('Kampong Thum', 'Province', None),
    ('Kampot', 'Province', None),
    ('Kandaal', 'Province', None),
    ('Kaoh Kong', 'Province', None),
    ('Gilbert Islands', 'Group of islands (20 inhabited islands)', None),
    ('Line Islands', 'Group of islands (20 inhabited islands)', None),
    ('Phoenix Islands', 'Group of islands (20 inhabited islands)', None),
    ('Andjouân', 'Island', None),
    ('Andjazîdja', 'Island', None),
    ('Mohéli', 'Island', None),
    ('Christ Church Nichola Town', 'Parish', 'KN-K'),
    ('Saint Anne Sandy Point', 'Parish', 'KN-K'),
    ('Saint George Basseterre', 'Parish', 'KN-K'),
    ('Saint George Gingerland', 'Parish', 'KN-N'),
    ('Saint James Windward', 'Parish', 'KN-N'),
    ('Saint John Capisterre', 'Parish', 'KN-K'),
    ('Saint John Figtree', 'Parish', 'KN-N'),
    ('Saint Mary Cayon', 'Parish', 'KN-K'),
    ('Saint Paul Capisterre', 'Parish', 'KN-K'),
    ('Saint Paul Charlestown', 'Parish', 'KN-N'),
    ('Saint Peter Basseterre', 'Parish', 'KN-K'),
    ('Saint Thomas Lowland', 'Parish', 'KN-N'),
    ('Saint Thomas Middle Island', 'Parish', 'KN-K'),
    ('Trinity Palmetto Point', 'Parish', 'KN-K'),
    ('Saint Kitts', 'State', None),
    ('Nevis', 'State', None),
    ("P'yǒngyang", 'Capital city', None),
    ("P'yǒngan-namdo", 'Province', None),
    ("P'yǒngan-bukto", 'Province', None),
    ('Chagang-do', 'Province', None),
    ('Hwanghae-namdo', 'Province', None),
    ('Hwanghae-bukto', 'Province', None),
    ('Kangweonto', 'Province', None),
    ('Hamgyǒng-namdo', 'Province', None),
    ('Hamgyǒng-bukto', 'Province', None),
    ('Ryanggang-do', 'Province', None),
    ('Raseon', 'Special city', None),
    ('Nampho', 'Metropolitan city', None),
    ('Seoul-teukbyeolsi', 'Special city', None),
    ('Busan-gwangyeoksi', 'Metropolitan city', None),
    ('Daegu-gwangyeoksi', 'Metropolitan city', None),
    ('Incheon-gwangyeoksi', 'Metropolitan city', None),
    ('Gwangju-gwangyeoksi', 'Metropolitan city', None),
    ('Daejeon-gwangyeoksi', 'Metropolitan city', None),
    ('Ulsan-gwangyeoksi', 'Metropolitan city', None),
    ('Gyeonggi-do', 'Province', None),
    ('Gangwon-do', 'Province', None),
    ('Chungcheongbuk-do', 'Province', None),
    ('Chungcheongnam-do', 'Province', None),
    ('Jeollabuk-do', 'Province', None),
    ('Jeollanam-do', 'Province', None),
    ('Gyeongsangbuk-do', 'Province', None),
    ('Gyeongsangnam-do', 'Province', None),
    ('Jeju-teukbyeoljachido', 'Special self-governing province', None),
    ('Sejong', 'Special self-governing city', None),
    ('Al Aḩmadī', 'Governorate', None),
    ('Al Farwānīyah', 'Governorate', None),
    ('Ḩawallī', 'Governorate', None),
    ('Al Jahrā’', 'Governorate', None),
    ('Al ‘Āşimah', 'Governorate', None),
    ('Mubārak al Kabīr', 'Governorate', None),
    ("Akmolinskaja oblast'", 'Region', None),
    ("Aktjubinskaja oblast'", 'Region', None),
    ('Almaty', 'City', None),
    ("Almatinskaja oblast'", 'Region', None),
    ('Nur-Sultan', 'City', None),
    ("Atyrauskaja oblast'", 'Region', None),
    ("Karagandinskaja oblast'", 'Region', None),
    ("Kostanajskaja oblast'", 'Region', None),
    ("Kyzylordinskaja oblast'", 'Region', None),
    ('Mangghystaū oblysy', 'Region', None),
    ('Pavlodar oblysy', 'Region', None),
    ("Severo-Kazahstanskaja oblast'", 'Region', None),
    ('Shymkent', 'City', None),
    ('Shyghys Qazaqstan oblysy', 'Region', None),
    ("Turkestankaya oblast'", 'Region', None),
    ('Batys Qazaqstan oblysy', 'Region', None),
    ('Zhambyl oblysy', 'Region', None),
    ('Attapu', 'Province', None),
    ('Bokèo', 'Province', None),
    ('Bolikhamxai', 'Province', None),
    ('Champasak', 'Province', None),
    ('Houaphan', 'Province', None),
    ('Khammouan', 'Province', None),
    ('Louang Namtha', 'Province', None),
    ('Louangphabang', 'Province', None),
    ('Oudômxai', 'Province', None),
    ('Phôngsali', 'Province', None),
    ('Salavan', 'Province', None),
    ('Savannakhét', 'Province', None),
    ('Viangchan', 'Province', None),
    ('Viangchan', 'Prefecture', None),
    ('Xaignabouli', 'Province', None),
    ('Xékong', 'Province', None),
    ('Xiangkhouang', 'Province', None),
    ('Xaisômboun', 'Province', None),
    ('Aakkâr', 'Governorate', None),
    ('Ash Shimāl', 'Governorate', None),
    ('Bayrūt', 'Governorate', None),
    ('Baalbek-Hermel', 'Governorate', None),
    ('Al Biqā‘', 'Governorate', None),
    ('Al Janūb', 'Governorate', None),
    ('Jabal Lubnān', 'Governorate', None),
    ('An Nabaţīyah', 'Governorate', None),
    ('Anse la Raye', 'District', None),
    ('Castries', 'District', None),
    ('Choiseul', 'District', None),
    ('Dennery', 'District', None),
    ('Gros Islet', 'District', None),
    ('Laborie', 'District', None),
    ('Micoud', 'District', None),
    ('Soufrière', 'District', None),
    ('Vieux Fort', 'District', None),
    ('Canaries', 'District', None),
    ('Balzers', 'Commune', None),
    ('Eschen', 'Commune', None),
    ('Gamprin', 'Commune', None),
    ('Mauren', 'Commune', None),
    ('Planken', 'Commune', None),
    ('Ruggell', 'Commune', None),
    ('Schaan', 'Commune', None),
    ('Schellenberg', 'Commune', None),
    ('Triesen', 'Commune', None),
    ('Triesenberg', 'Commune', None),
    ('Vaduz', 'Commune', None),
    ('Western Province', 'Province', None),
    ('Colombo', 'District', 'LK-1'),
    ('Gampaha', 'District', 'LK-1'),
    ('Kalutara', 'District', 'LK-1'),
    ('Central Province', 'Province', None),
    ('Kandy', 'District', 'LK-2'),
    ('Matale', 'District', 'LK-2'),
    ('Nuwara Eliya', 'District', 'LK-2'),
    ('Southern Province', 'Province', None),
    ('Galle', 'District', 'LK-3'),
    ('Matara', 'District', 'LK-3'),
    ('Hambantota', 'District', 'LK-3'),
    ('Northern Province', 'Province', None),
    ('Jaffna', 'District', 'LK-4'),
    ('Kilinochchi', 'District', 'LK-4'),
    ('Mannar', 'District', 'LK-4'),
    ('Vavuniya', 'District', 'LK-4'),
    ('Mullaittivu', 'District', 'LK-4'),
    ('Eastern Province', 'Province', None),
    ('Batticaloa', 'District', 'LK-5'),
    ('Ampara', 'District', 'LK-5'),
    ('Trincomalee', 'District', 'LK-5'),
    ('North Western Province', 'Province', None),
    ('Kurunegala', 'District', 'LK-6'),
    ('Puttalam', 'District', 'LK-6'),
    ('North Central Province', 'Province', None),
    ('Anuradhapura', 'District', 'LK-7'),
    ('Polonnaruwa', 'District', 'LK-7'),
    ('Uva Province', 'Province', None),
    ('Badulla', 'District', 'LK-8'),
    ('Monaragala', 'District', 'LK-8'),
    ('Sabaragamuwa Province', 'Province', None),
    ('Ratnapura', 'District', 'LK-9'),
    ('Kegalla', 'District', 'LK-9'),
    ('Bong', 'County', None),
    ('Bomi', 'County', None),
    ('Grand Cape Mount', 'County', None),
    ('Grand Bassa', 'County', None),
    ('Grand Gedeh', 'County', None),
    ('Grand Kru', 'County', None),
    ('Gbarpolu', 'County', None),
    ('Lofa', 'County', None),
    ('Margibi', 'County', None),
    ('Montserrado', 'County', None),
    ('Maryland', 'County', None),
    ('Nimba', 'County', None),
    ('River Gee', 'County', None),
    ('River Cess', 'County', None),
    ('Sinoe', 'County', None),
    ('Maseru', 'District', None),
    ('Botha-Bothe', 'District', None),
    ('Leribe', 'District', None),
    ('Berea', 'District', None),
    ('Mafeteng', 'District', None),
    ("Mohale's Hoek", 'District', None),
    ('Quthing', 'District', None),
    ("Qacha's Nek", 'District', None),
    ('Mokhotlong', 'District', None),
    ('Thaba-Tseka', 'District', None),
    ('Akmenė', 'District municipality', None),
    ('Alytaus miestas', 'City municipality', None),
    ('Alytus', 'District municipality', None),
    ('Anykščiai', 'District municipality', None),
    ('Birštono', 'Municipality', None),
    ('Biržai', 'District municipality', None),
    ('Druskininkai', 'Municipality', None),
    ('Elektrėnai', 'Municipality', None),
    ('Ignalina', 'District municipality', None),
    ('Jonava', 'District municipality', None),
    ('Joniškis', 'District municipality', None),
    ('Jurbarkas', 'District municipality', None),
    ('Kaišiadorys', 'District municipality', None),
    ('Kalvarijos', 'Municipality', None),
    ('Kauno miestas', 'City municipality', None),
    ('Kaunas', 'District municipality', None),
    ('Kazlų Rūdos', 'Municipality', None),
    ('Kėdainiai', 'District municipality', None),
    ('Kelmė', 'District municipality', None),
    ('Klaipėdos miestas', 'City municipality', None),
    ('Klaipėda', 'District municipality', None),
    ('Kretinga', 'District municipality', None),
    ('Kupiškis', 'District municipality', None),
    ('Lazdijai', 'District municipality', None),
    ('Marijampolė', 'District municipality', None),
    ('Mažeikiai', 'District municipality', None),
    ('Molėtai', 'District municipality', None),
    ('Neringa', 'Municipality', None),
    ('Pagėgiai', 'Municipality', None),
    ('Pakruojis', 'District municipality', None),
    ('Palangos miestas', 'City municipality', None),
    ('Panevėžio miestas', 'City municipality', None),
    ('Panevėžys', 'District municipality', None),
    ('Pasvalys', 'District municipality', None),
    ('Plungė', 'District municipality', None),
    ('Prienai', 'District municipality', None),
    ('Radviliškis', 'District municipality', None),
    ('Raseiniai', 'District municipality', None),
    ('Rietavo', 'Municipality', None),
    ('Rokiškis', 'District municipality', None),
    ('Šakiai', 'District municipality', None),
    ('Šalčininkai', 'District municipality', None),
    ('Šiaulių miestas', 'City municipality', None),
    ('Šiauliai', 'District municipality', None),
    ('Šilalė', 'District municipality', None),
    ('Šilutė', 'District municipality', None),
    ('Širvintos', 'District municipality', None),
    ('Skuodas', 'District municipality', None),
    ('Švenčionys', 'District municipality', None),
    ('Tauragė', 'District municipality', None),
    ('Telšiai', 'District municipality', None),
    ('Trakai', 'District municipality', None),
    ('Ukmergė', 'District municipality', None),
    ('Utena', 'District municipality', None),
    ('Varėna', 'District municipality', None),
    ('Vilkaviškis', 'District municipality', None),
    ('Vilniaus miestas', 'City municipality', None),
    ('Vilnius', 'District municipality', None),
    ('Visaginas', 'Municipality', None),
    ('Zarasai', 'District municipality', None),
    ('Alytaus apskritis', 'County', None),
    ('Klaipėdos apskritis', 'County', None),
    ('Kauno apskritis', 'County', None),
    ('Marijampolės apskritis', 'County', None),
    ('Panevėžio apskritis', 'County', None),
    ('Šiaulių apskritis', 'County', None),
    ('Tauragės apskritis', 'County', None),
    ('Telšių apskritis', 'County', None),
    ('Utenos apskritis', 'County', None),
    ('Vilniaus apskritis', 'County', None),
    ('Capellen', 'Canton', None),
    ('Clerf', 'Canton', None),
    ('Diekirch', 'Canton', None),
    ('Echternach', 'Canton', None),
    ('Esch an der Alzette', 'Canton', None),
    ('Grevenmacher', 'Canton', None),
    ('Luxembourg', 'Canton', None),
    ('Mersch', 'Canton', None),
    ('Redange', 'Canton', None),
    ('Remich', 'Canton', None),
    ('Veianen', 'Canton', None),
    ('Wiltz', 'Canton', None),
    ('Aglonas novads', 'Municipality', None),
    ('Aizkraukles novads', 'Municipality', None),
    ('Aizputes novads', 'Municipality', None),
    ('Aknīstes novads', 'Municipality', None),
    ('Alojas novads', 'Municipality', None),
    ('Alsungas novads', 'Municipality', None),
    ('Alūksnes novads', 'Municipality', None),
    ('Amatas novads', 'Municipality', None),
    ('Apes novads', 'Municipality', None),
    ('Auces novads', 'Municipality', None),
    ('Ādažu novads', 'Municipality', None),
    ('Babītes novads', 'Municipality', None),
    ('Baldones novads', 'Municipality', None),
    ('Baltinavas novads', 'Municipality', None),
    ('Balvu novads', 'Municipality', None),
    ('Bauskas novads', 'Municipality', None),
    ('Beverīnas novads', 'Municipality', None),
    ('Brocēnu novads', 'Municipality', None),
    ('Burtnieku novads', 'Municipality', None),
    ('Carnikavas novads', 'Municipality', None),
    ('Cesvaines novads', 'Municipality', None),
    ('Cēsu novads', 'Municipality', None),
    ('Ciblas novads', 'Municipality', None),
    ('Dagdas novads', 'Municipality', None),
    ('Daugavpils novads', 'Municipality', None),
    ('Dobeles novads', 'Municipality', None),
    ('Dundagas novads', 'Municipality', None),
    ('Durbes novads', 'Municipality', None),
    ('Engures novads', 'Municipality', None),
    ('Ērgļu novads', 'Municipality', None),
    ('Garkalnes novads', 'Municipality', None),
    ('Grobiņas novads', 'Municipality', None),
    ('Gulbenes novads', 'Municipality', None),
    ('Iecavas novads', 'Municipality', None),
    ('Ikšķiles novads', 'Municipality', None),
    ('Ilūkstes novads', 'Municipality', None),
    ('Inčukalna novads', 'Municipality', None),
    ('Jaunjelgavas novads', 'Municipality', None),
    ('Jaunpiebalgas novads', 'Municipality', None),
    ('Jaunpils novads', 'Municipality', None),
    ('Jelgavas novads', 'Municipality', None),
    ('Jēkabpils novads', 'Municipality', None),
    ('Kandavas novads', 'Municipality', None),
    ('Kārsavas novads', 'Municipality', None),
    ('Kocēnu novads', 'Municipality', None),
    ('Kokneses novads', 'Municipality', None),
    ('Krāslavas novads', 'Municipality', None),
    ('Krimuldas novads', 'Municipality', None),
    ('Krustpils novads', 'Municipality', None),
    ('Kuldīgas novads', 'Municipality', None),
    ('Ķeguma novads', 'Municipality', None),
    ('Ķekavas novads', 'Municipality', None),
    ('Lielvārdes novads', 'Municipality', None),
    ('Limbažu novads', 'Municipality', None),
    ('Līgatnes novads', 'Municipality', None),
    ('Līvānu novads', 'Municipality', None),
    ('Lubānas novads', 'Municipality', None),
    ('Ludzas novads', 'Municipality', None),
    ('Madonas novads', 'Municipality', None),
    ('Mazsalacas novads', 'Municipality', None),
    ('Mālpils novads', 'Municipality', None),
    ('Mārupes novads', 'Municipality', None),
    ('Mērsraga novads', 'Municipality', None),
    ('Naukšēnu novads', 'Municipality', None),
    ('Neretas novads', 'Municipality', None),
    ('Nīcas novads', 'Municipality', None),
    ('Ogres novads', 'Municipality', None),
    ('Olaines novads', 'Municipality', None),
    ('Ozolnieku novads', 'Municipality', None),
    ('Pārgaujas novads', 'Municipality', None),
    ('Pāvilostas novads', 'Municipality', None),
    ('Pļaviņu novads', 'Municipality', None),
    ('Preiļu novads', 'Municipality', None),
    ('Priekules novads', 'Municipality', None),
    ('Priekuļu novads', 'Municipality', None),
    ('Raunas novads', 'Municipality', None),
    ('Rēzeknes novads', 'Municipality', None),
    ('Riebiņu novads', 'Municipality', None),
    ('Rojas novads', 'Municipality', None),
    ('Ropažu novads', 'Municipality', None),
    ('Rucavas novads', 'Municipality', None),
    ('Rugāju novads', 'Municipality', None),
    ('Rundāles novads', 'Municipality', None),
    ('Rūjienas novads', 'Municipality', None),
    ('Salas novads', 'Municipality', None),
    ('Salacgrīvas novads', 'Municipality', None),
    ('Salaspils novads', 'Municipality', None),
    ('Saldus novads', 'Municipality', None),
    ('Saulkrastu novads', 'Municipality', None),
    ('Sējas novads', 'Municipality', None),
    ('Siguldas novads', 'Municipality', None),
    ('Skrīveru novads', 'Municipality', None),
    ('Skrundas novads', 'Municipality', None),
    ('Smiltenes novads', 'Municipality', None),
    ('Stopiņu novads', 'Municipality', None),
    ('Strenču novads', 'Municipality', None),
    ('Talsu novads', 'Municipality', None),
    ('Tērvetes novads', 'Municipality', None),
    ('Tukuma novads', 'Municipality', None),
    ('Vaiņodes novads', 'Municipality', None),
    ('Valkas novads', 'Municipality', None),
    ('Varakļānu novads', 'Municipality', None),
    ('Vārkavas novads', 'Municipality', None),
    ('Vecpiebalgas novads', 'Municipality', None),
    ('Vecumnieku novads', 'Municipality', None),
    ('Ventspils novads', 'Municipality', None),
    ('Viesītes novads', 'Municipality', None),
    ('Viļakas novads', 'Municipality', None),
    ('Viļānu novads', 'Municipality', None),
    ('Zilupes novads', 'Municipality', None),
    ('Daugavpils', 'Republican city', None),
    ('Jelgava', 'Republican city', None),
    ('Jēkabpils', 'Republican city', None),
    ('Jūrmala', 'Republican city', None),
    ('Liepāja', 'Republican city', None),
    ('Rēzekne', 'Republican city', None),
    ('Rīga', 'Republican city', None),
    ('Ventspils', 'Republican city', None),
    ('Valmiera', 'Republican city', None),
    ('Banghāzī', 'Popularate', None),
    ('Al Buţnān', 'Popularate', None),
    ('Darnah', 'Popularate', None),
    ('Ghāt', 'Popularate', None),
    ('Al Jabal al Akhḑar', 'Popularate', None),
    ('Al Jabal al Gharbī', 'Popularate', None),
    ('Al Jafārah', 'Popularate', None),
    ('Al Jufrah', 'Popularate', None),
    ('Al Kufrah', 'Popularate', None),
    ('Al Marqab', 'Popularate', None),
    ('Mişrātah', 'Popularate', None),
    ('Al Marj', 'Popularate', None),
    ('Murzuq', 'Popularate', None),
    ('Nālūt', 'Popularate', None),
    ('An Nuqāţ al Khams', 'Popularate', None),
    ('Sabhā', 'Popularate', None),
    ('Surt', 'Popularate', None),
    ('Ţarābulus', 'Popularate', None),
    ('Al Wāḩāt', 'Popularate', None),
    ('Wādī al Ḩayāt', 'Popularate', None),
    ('Wādī ash Shāţi’', 'Popularate', None),
    ('Az Zāwiyah', 'Popularate', None),
    ('Tanger-Tétouan-Al Hoceïma', 'Region', None),
    ("L'Oriental", 'Region', None),
    ('Fès-Meknès', 'Region', None),
    ('Rabat-Salé-Kénitra', 'Region', None),
    ('Béni Mellal-Khénifra', 'Region', None),
    ('Casablanca-Settat', 'Region', None),
    ('Marrakech-Safi', 'Region', None),
    ('Drâa-Tafilalet', 'Region', None),
    ('Souss-Massa', 'Region', None),
    ('Guelmim-Oued Noun (EH-partial)', 'Region', None),
    ('Laâyoune-Sakia El Hamra (EH-partial)', 'Region', None),
    ('Dakhla-Oued Ed-Dahab (EH)', 'Region', None),
    ('Agadir-Ida-Ou-Tanane', 'Prefecture', 'MA-09'),
    ('Aousserd (EH)', 'Province', 'MA-12'),
    ('Assa-Zag (EH-partial)', 'Province', 'MA-10'),
    ('Azilal', 'Province', 'MA-05'),
    ('Béni Mellal', 'Province', 'MA-05'),
    ('Berkane', 'Province', 'MA-02'),
    ('Benslimane', 'Province', 'MA-06'),
    ('Boujdour (EH)', 'Province', 'MA-11'),
    ('Boulemane', 'Province', 'MA-03'),
    ('Berrechid', 'Province', 'MA-06'),
    ('Casablanca', 'Prefecture', 'MA-06'),
    ('Chefchaouen', 'Province', 'MA-01'),
    ('Chichaoua', 'Province', 'MA-07'),
    ('Chtouka-Ait Baha', 'Province', 'MA-06'),
    ('Driouch', 'Province', 'MA-02'),
    ('Errachidia', 'Province', 'MA-08'),
    ('Essaouira', 'Province', 'MA-07'),
    ('Es-Semara (EH-partial)', 'Province', 'MA-11'),
    ('Fahs-Anjra', 'Province', 'MA-01'),
    ('Fès', 'Prefecture', 'MA-03'),
    ('Figuig', 'Province', 'MA-02'),
    ('Fquih Ben Salah', 'Province', 'MA-05'),
    ('Guelmim', 'Province', 'MA-10'),
    ('Guercif', 'Province', 'MA-02'),
    ('El Hajeb', 'Province', 'MA-03'),
    ('Al Haouz', 'Province', 'MA-07'),
    ('Al Hoceïma', 'Province', 'MA-01'),
    ('Ifrane', 'Province', 'MA-03'),
    ('Inezgane-Ait Melloul', 'Prefecture', 'MA-09'),
    ('El Jadida', 'Province', 'MA-06'),
    ('Jerada', 'Province', 'MA-02'),
    ('Kénitra', 'Province', 'MA-04'),
    ('El Kelâa des Sraghna', 'Province', 'MA-07'),
    ('Khémisset', 'Province', 'MA-04'),
    ('Khénifra', 'Province', 'MA-05'),
    ('Khouribga', 'Province', 'MA-05'),
    ('Laâyoune (EH)', 'Province', 'MA-11'),
    ('Larache', 'Province', 'MA-01'),
    ('Marrakech', 'Prefecture', 'MA-07'),
    ('M’diq-Fnideq', 'Prefecture', 'MA-01'),
    ('Médiouna', 'Province', 'MA-06'),
    ('Meknès', 'Prefecture', 'MA-03'),
    ('Midelt', 'Province', 'MA-08'),
    ('Mohammadia', 'Prefecture', 'MA-06'),
    ('Moulay Yacoub', 'Province', 'MA-03'),
    ('Nador', 'Province', 'MA-02'),
    ('Nouaceur', 'Province', 'MA-04'),
    ('Ouarzazate', 'Province', 'MA-08'),
    ('Oued Ed-Dahab (EH)', 'Province', 'MA-12'),
    ('Oujda-Angad', 'Prefecture', 'MA-02'),
    ('Ouezzane', 'Province', 'MA-01'),
    ('Rabat', 'Prefecture', 'MA-04'),
    ('Rehamna', 'Province', 'MA-07'),
    ('Safi', 'Province', 'MA-07'),
    ('Salé', 'Prefecture', 'MA-04'),
    ('Sefrou', 'Province', 'MA-03'),
    ('Settat', 'Province', 'MA-06'),
    ('Sidi Bennour', 'Province', 'MA-06'),
    ('Sidi Ifni', 'Province', 'MA-10'),
    ('Sidi Kacem', 'Province', 'MA-04'),
    ('Sidi Slimane', 'Province', 'MA-04'),
    ('Skhirate-Témara', 'Prefecture', 'MA-04'),
    ('Tarfaya (EH-partial)', 'Province', 'MA-11'),
    ('Taourirt', 'Province', 'MA-02'),
    ('Taounate', 'Province', 'MA-03'),
    ('Taroudannt', 'Province', 'MA-09'),
    ('Tata', 'Province', 'MA-09'),
    ('Taza', 'Province', 'MA-03'),
    ('Tétouan', 'Province', 'MA-01'),
    ('Tinghir', 'Province', 'MA-08'),
    ('Tiznit', 'Province', 'MA-09'),
    ('Tanger-Assilah', 'Prefecture', 'MA-01'),
    ('Tan-Tan (EH-partial)', 'Province', 'MA-10'),
    ('Youssoufia', 'Province', 'MA-07'),
    ('Zagora', 'Province', 'MA-08'),
    ('La Colle', 'Quarter', None),
    ('La Condamine', 'Quarter', None),
    ('Fontvieille', 'Quarter', None),
    ('La Gare', 'Quarter', None),
    ('Jardin Exotique', 'Quarter', None),
    ('Larvotto', 'Quarter', None),
    ('Malbousquet', 'Quarter', None),
    ('Monte-Carlo', 'Quarter', None),
    ('Moneghetti', 'Quarter', None),
    ('Monaco-Ville', 'Quarter', None),
    ('Moulins', 'Quarter', None),
    ('Port-Hercule', 'Quarter', None),
    ('Sainte-Dévote', 'Quarter', None),
    ('La Source', 'Quarter', None),
    ('Spélugues', 'Quarter', None),
    ('Saint-Roman', 'Quarter', None),
    ('Vallon de la Rousse', 'Quarter', None),
    ('Anenii Noi', 'District', None),
    ('Bălți', 'City', None),
    ('Bender [Tighina]', 'City', None),
    ('Briceni', 'District', None),
    ('Basarabeasca', 'District', None),
    ('Cahul', 'District', None),
    ('Călărași', 'District', None),
    ('Cimișlia', 'District', None),
    ('Criuleni', 'District', None),
    ('Căușeni', 'District', None),
    ('Cantemir', 'District', None),
    ('Chișinău', 'City', None),
    ('Dondușeni', 'District', None),
    ('Drochia', 'District', None),
    ('Dubăsari', 'District', None),
    ('Edineț', 'District', None),
    ('Fălești', 'District', None),
    ('Florești', 'District', None),
    ('Găgăuzia, Unitatea teritorială autonomă (UTAG)', 'Autonomous territorial unit', None),
    ('Glodeni', 'District', None),
    ('Hîncești', 'District', None),
    ('Ialoveni', 'District', None),
    ('Leova', 'District', None),
    ('Nisporeni', 'District', None),
    ('Ocnița', 'District', None),
    ('Orhei', 'District', None),
    ('Rezina', 'District', None),
    ('Rîșcani', 'District', None),
    ('Șoldănești', 'District', None),
    ('Sîngerei', 'District', None),
    ('Stînga Nistrului, unitatea teritorială din', 'Territorial unit', None),
    ('Soroca', 'District', None),
    ('Strășeni', 'District', None),
    ('Ștefan Vodă', 'District', None),
    ('Taraclia', 'District', None),
    ('Telenești', 'District', None),
    ('Ungheni', 'District', None),
    ('Andrijevica', 'Municipality', None),
    ('Bar', 'Municipality', None),
    ('Berane', 'Municipality', None),
    ('Bijelo Polje', 'Municipality', None),
    ('Budva', 'Municipality', None),
    ('Cetinje', 'Municipality', None),
    ('Danilovgrad', 'Municipality', None),
    ('Herceg-Novi', 'Municipality', None),
    ('Kolašin', 'Municipality', None),
    ('Kotor', 'Municipality', None),
    ('Mojkovac', 'Municipality', None),
    ('Nikšić', 'Municipality', None),
    ('Plav', 'Municipality', None),
    ('Pljevlja', 'Municipality', None),
    ('Plužine', 'Municipality', None),
    ('Podgorica', 'Municipality', None),
    ('Rožaje', 'Municipality', None),
    ('Šavnik', 'Municipality', None),
    ('Tivat', 'Municipality', None),
    ('Ulcinj', 'Municipality', None),
    ('Žabljak', 'Municipality', None),
    ('Gusinje', 'Municipality', None),
    ('Petnjica', 'Municipality', None),
    ('Tuzi', 'Municipality', None),
    ('Toamasina', 'Province', None),
    ('Antsiranana', 'Province', None),
    ('Fianarantsoa', 'Province', None),
    ('Mahajanga', 'Province', None),
    ('Antananarivo', 'Province', None),
    ('Toliara', 'Province', None),
    ('Ailuk', 'Municipality', 'MH-T'),
    ('Ailinglaplap', 'Municipality', 'MH-L'),
    ('Arno', 'Municipality', 'MH-T'),
    ('Aur', 'Municipality', 'MH-T'),
    ('Ebon', 'Municipality', 'MH-L'),
    ('Enewetak & Ujelang', 'Municipality', 'MH-L'),
    ('Jabat', 'Municipality', 'MH-L'),
    ('Jaluit', 'Municipality', 'MH-L'),
    ('Bikini & Kili', 'Municipality', 'MH-L'),
    ('Kwajalein', 'Municipality', 'MH-L'),
    ('Ralik chain', 'Chain (of islands)', None),
    ('Lae', 'Municipality', 'MH-L'),
    ('Lib', 'Municipality', 'MH-L'),
    ('Likiep', 'Municipality', 'MH-T'),
    ('Majuro', 'Municipality', 'MH-T'),
    ('Maloelap', 'Municipality', 'MH-T'),
    ('Mejit', 'Municipality', 'MH-T'),
    ('Mili', 'Municipality', 'MH-T'),
    ('Namdrik', 'Municipality', 'MH-L'),
    ('Namu', 'Municipality', 'MH-L'),
    ('Rongelap', 'Municipality', 'MH-L'),
    ('Ratak chain', 'Chain (of islands)', None),
    ('Ujae', 'Municipality', 'MH-L'),
    ('Utrik', 'Municipality', 'MH-T'),
    ('Wotho', 'Municipality', 'MH-L'),
    ('Wotje', 'Municipality', 'MH-T'),
    ('Veles', 'Municipality', None),
    ('Gradsko', 'Municipality', None),
    ('Demir Kapija', 'Municipality', None),
    ('Kavadarci', 'Municipality', None),
    ('Lozovo', 'Municipality', None),
    ('Negotino', 'Municipality', None),
    ('Rosoman', 'Municipality', None),
    ('Sveti Nikole', 'Municipality', None),
    ('Čaška', 'Municipality', None),
    ('Berovo', 'Municipality', None),
    ('Vinica', 'Municipality', None),
    ('Delčevo', 'Municipality', None),
    ('Zrnovci', 'Municipality', None),
    ('Karbinci', 'Municipality', None),
    ('Kočani', 'Municipality', None),
    ('Makedonska Kamenica', 'Municipality', None),
    ('Pehčevo', 'Municipality', None),
    ('Probištip', 'Municipality', None),
    ('Češinovo-Obleševo', 'Municipality', None),
    ('Štip', 'Municipality', None),
    ('Vevčani', 'Municipality', None),
    ('Debar', 'Municipality', None),
    ('Debrca', 'Municipality', None),
    ('Kičevo', 'Municipality', None),
    ('Makedonski Brod', 'Municipality', None),
    ('Ohrid', 'Municipality', None),
    ('Plasnica', 'Municipality', None),
    ('Struga', 'Municipality', None),
    ('Centar Župa', 'Municipality', None),
    ('Bogdanci', 'Municipality', None),
    ('Bosilovo', 'Municipality', None),
    ('Valandovo', 'Municipality', None),
    ('Vasilevo', 'Municipality', None),
    ('Gevgelija', 'Municipality', None),
    ('Dojran', 'Municipality', None),
    ('Konče', 'Municipality', None),
    ('Novo Selo', 'Municipality', None),
    ('Radoviš', 'Municipality', None),
    ('Strumica', 'Municipality', None),
    ('Bitola', 'Municipality', None),
    ('Demir Hisar', 'Municipality', None),
    ('Dolneni', 'Municipality', None),
    ('Krivogaštani', 'Municipality', None),
    ('Kruševo', 'Municipality', None),
    ('Mogila', 'Municipality', None),
    ('Novaci', 'Municipality', None),
    ('Prilep', 'Municipality', None),
    ('Resen', 'Municipality', None),
    ('Bogovinje', 'Municipality', None),
    ('Brvenica', 'Municipality', None),
    ('Vrapčište', 'Municipality', None),
    ('Gostivar', 'Municipality', None),
    ('Želino', 'Municipality', None),
    ('Jegunovce', 'Municipality', None),
    ('Mavrovo i Rostuše', 'Municipality', None),
    ('Tearce', 'Municipality', None),
    ('Tetovo', 'Municipality', None),
    ('Kratovo', 'Municipality', None),
    ('Kriva Palanka', 'Municipality', None),
    ('Kumanovo', 'Municipality', None),
    ('Lipkovo', 'Municipality', None),
    ('Rankovce', 'Municipality', None),
    ('Staro Nagoričane', 'Municipality', None),
    ('Aerodrom †', 'Municipality', None),
    ('Aračinovo', 'Municipality', None),
    ('Butel †', 'Municipality', None),
    ('Gazi Baba †', 'Municipality', None),
    ('Gjorče Petrov †', 'Municipality', None),
    ('Zelenikovo', 'Municipality', None),
    ('Ilinden', 'Municipality', None),
    ('Karpoš †', 'Municipality', None),
    ('Kisela Voda †', 'Municipality', None),
    ('Petrovec', 'Municipality', None),
    ('Saraj †', 'Municipality', None),
    ('Sopište', 'Municipality', None),
    ('Studeničani', 'Municipality', None),
    ('Centar †', 'Municipality', None),
    ('Čair †', 'Municipality', None),
    ('Čučer-Sandevo', 'Municipality', None),
    ('Šuto Orizari †', 'Municipality', None),
    ('Kayes', 'Region', None),
    ('Taoudénit', 'Region', None),
    ('Koulikoro', 'Region', None),
    ('Sikasso', 'Region', None),
    ('Ségou', 'Region', None),
    ('Mopti', 'Region', None),
    ('Tombouctou', 'Region', None),
    ('Gao', 'Region', None),
    ('Kidal', 'Region', None),
    ('Ménaka', 'Region', None),
    ('Bamako', 'District', None),
    ('Sagaing', 'Region', None),
    ('Bago', 'Region', None),
    ('Magway', 'Region', None),
    ('Mandalay', 'Region', None),
    ('Tanintharyi', 'Region', None),
    ('Yangon', 'Region', None),
    ('Ayeyarwady', 'Region', None),
    ('Kachin', 'State', None),
    ('Kayah', 'State', None),
    ('Kayin', 'State', None),
    ('Chin', 'State', None),
    ('Mon', 'State', None),
    ('Rakhine', 'State', None),
    ('Shan', 'State', None),
    ('Nay Pyi Taw', 'Union territory', None),
    ('Orhon', 'Province', None),
    ('Darhan uul', 'Province', None),
    ('Hentiy', 'Province', None),
    ('Hövsgöl', 'Province', None),
    ('Hovd', 'Province', None),
    ('Uvs', 'Province', None),
    ('Töv', 'Province', None),
    ('Selenge', 'Province', None),
    ('Sühbaatar', 'Province', None),
    ('Ömnögovĭ', 'Province', None),
    ('Övörhangay', 'Province', None),
    ('Dzavhan', 'Province', None),
    ('Dundgovĭ', 'Province', None),
    ('Dornod', 'Province', None),
    ('Dornogovĭ', 'Province', None),
    ('Govĭ-Sümber', 'Province', None),
    ('Govĭ-Altay', 'Province', None),
    ('Bulgan', 'Province', None),
    ('Bayanhongor', 'Province', None),
    ('Bayan-Ölgiy', 'Province', None),
    ('Arhangay', 'Province', None),
    ('Ulaanbaatar', 'Capital city', None),
    ('Hodh ech Chargui', 'Region', None),
    ('Hodh el Gharbi', 'Region', None),
    ('Assaba', 'Region', None),
    ('Gorgol', 'Region', None),
    ('Brakna', 'Region', None),
    ('Trarza', 'Region', None),
    ('Adrar', 'Region', None),
    ('Dakhlet Nouâdhibou', 'Region', None),
    ('Tagant', 'Region', None),
    ('Guidimaka', 'Region', None),
    ('Tiris Zemmour', 'Region', None),
    ('Inchiri', 'Region', None),
    ('Nouakchott Ouest', 'Region', None),
    ('Nouakchott Nord', 'Region', None),
    ('Nouakchott Sud', 'Region', None),
    ('Attard', 'Local council', None),
    ('Balzan', 'Local council', None),
    ('Birgu', 'Local council', None),
    ('Birkirkara', 'Local council', None),
    ('Birżebbuġa', 'Local council', None),
    ('Bormla', 'Local council', None),
    ('Dingli', 'Local council', None),
    ('Fgura', 'Local council', None),
    ('Floriana', 'Local council', None),
    ('Fontana', 'Local council', None),
    ('Gudja', 'Local council', None),
    ('Gżira', 'Local council', None),
    ('Għajnsielem', 'Local council', None),
    ('Għarb', 'Local council', None),
    ('Għargħur', 'Local council', None),
    ('Għasri', 'Local council', None),
    ('Għaxaq', 'Local council', None),
    ('Ħamrun', 'Local council', None),
    ('Iklin', 'Local council', None),
    ('Isla', 'Local council', None),
    ('Kalkara', 'Local council', None),
    ('Kerċem', 'Local council', None),
    ('Kirkop', 'Local council', None),
    ('Lija', 'Local council', None),
    ('Luqa', 'Local council', None),
    ('Marsa', 'Local council', None),
    ('Marsaskala', 'Local council', None),
    ('Marsaxlokk', 'Local council', None),
    ('Mdina', 'Local council', None),
    ('Mellieħa', 'Local council', None),
    ('Mġarr', 'Local council', None),
    ('Mosta', 'Local council', None),
    ('Mqabba', 'Local council', None),
    ('Msida', 'Local council', None),
    ('Mtarfa', 'Local council', None),
    ('Munxar', 'Local council', None),
    ('Nadur', 'Local council', None),
    ('Naxxar', 'Local council', None),
    ('Paola', 'Local council', None),
    ('Pembroke', 'Local council', None),
    ('Pietà', 'Local council', None),
    ('Qala', 'Local council', None),
    ('Qormi', 'Local council', None),
    ('Qrendi', 'Local council', None),
    ('Rabat Gozo', 'Local council', None),
    ('Rabat Malta', 'Local council', None),
    ('Safi', 'Local council', None),
    ("Saint Julian's", 'Local council', None),
    ('Saint John', 'Local council', None),
    ('Saint Lawrence', 'Local council', None),
    ("Saint Paul's Bay", 'Local council', None),
    ('Sannat', 'Local council', None),
    ("Saint Lucia's", 'Local council', None),
    ('Santa Venera', 'Local council', None),
    ('Siġġiewi', 'Local council', None),
    ('Sliema', 'Local council', None),
    ('Swieqi', 'Local council', None),
    ("Ta' Xbiex", 'Local council', None),
    ('Tarxien', 'Local council', None),
    ('Valletta', 'Local council', None),
    ('Xagħra', 'Local council', None),
    ('Xewkija', 'Local council', None),
    ('Xgħajra', 'Local council', None),
    ('Żabbar', 'Local council', None),
    ('Żebbuġ Gozo', 'Local council', None),
    ('Żebbuġ Malta', 'Local council', None),
    ('Żejtun', 'Local council', None),
    ('Żurrieq', 'Local council', None),
    ('Agalega Islands', 'Dependency', None),
    ('Black River', 'District', None),
    ('Cargados Carajos Shoals', 'Dependency', None),
    ('Flacq', 'District', None),
    ('Grand Port', 'District', None),
    ('Moka', 'District', None),
    ('Pamplemousses', 'District', None),
    ('Port Louis', 'District', None),
    ('Plaines Wilhems', 'District', None),
    ('Rodrigues Island', 'Dependency', None),
    ('Rivière du Rempart', 'District', None),
    ('Savanne', 'District', None),
    ('South Ari Atoll', 'Administrative atoll', None),
    ('Addu City', 'City', None),
    ('North Ari Atoll', 'Administrative atoll', None),
    ('Faadhippolhu', 'Administrative atoll', None),
    ('Felidhu Atoll', 'Administrative atoll', None),
    ('Hahdhunmathi', 'Administrative atoll', None),
    ('North Thiladhunmathi', 'Administrative atoll', None),
    ('Kolhumadulu', 'Administrative atoll', None),
    ('Mulaku Atoll', 'Administrative atoll', None),
    ('North Maalhosmadulu', 'Administrative atoll', None),
    ('North Nilandhe Atoll', 'Administrative atoll', None),
    ('South Nilandhe Atoll', 'Administrative atoll', None),
    ('South Maalhosmadulu', 'Administrative atoll', None),
    ('South Thiladhunmathi', 'Administrative atoll', None),
    ('North Miladhunmadulu', 'Administrative atoll', None),
    ('South Miladhunmadulu', 'Administrative atoll', None),
    ('Male Atoll', 'Administrative atoll', None),
    ('North Huvadhu Atoll', 'Administrative atoll', None),
    ('South Huvadhu Atoll', 'Administrative atoll', None),
    ('Fuvammulah', 'Administrative atoll', None),
    ('Male', 'City', None),
    ('Balaka', 'District', 'MW-S'),
    ('Blantyre', 'District', 'MW-S'),
    ('Central Region', 'Region', None),
    ('Chikwawa', 'District', 'MW-S'),
    ('Chiradzulu', 'District', 'MW-S'),
    ('Chitipa', 'District', 'MW-N'),
    ('Dedza', 'District', 'MW-C'),
    ('Dowa', 'District', 'MW-C'),
    ('Karonga', 'District', 'MW-N'),
    ('Kasungu', 'District', 'MW-C'),
    ('Lilongwe', 'District', 'MW-C'),
    ('Likoma', 'District', 'MW-N'),
    ('Mchinji', 'District', 'MW-C'),
    ('Mangochi', 'District', 'MW-S'),
    ('Machinga', 'District', 'MW-S'),
    ('Mulanje', 'District', 'MW-S'),
    ('Mwanza', 'District', 'MW-S'),
    ('Mzimba', 'District', 'MW-N'),
    ('Northern Region', 'Region', None),
    ('Nkhata Bay', 'District', 'MW-N'),
    ('Neno', 'District', 'MW-S'),
    ('Ntchisi', 'District', 'MW-C'),
    ('Nkhotakota', 'District', 'MW-C'),
    ('Nsanje', 'District', 'MW-S'),
    ('Ntcheu', 'District', 'MW-C'),
    ('Phalombe', 'District', 'MW-S'),
    ('Rumphi', 'District', 'MW-N'),
    ('Southern Region', 'Region', None),
    ('Salima', 'District', 'MW-C'),
    ('Thyolo', 'District', 'MW-S'),
    ('Zomba', 'District', 'MW-S'),
    ('Aguascalientes', 'State', None),
    ('Baja California', 'State', None),
    ('Baja California Sur', 'State', None),
    ('Campeche', 'State', None),
    ('Chihuahua', 'State', None),
    ('Chiapas', 'State', None),
    ('Ciudad de México', 'Federal district', None),
    ('Coahuila de Zaragoza', 'State', None),
    ('Colima', 'State', None),
    ('Durango', 'State', None),
    ('Guerrero', 'State', None),
    ('Guanajuato', 'State', None),
    ('Hidalgo', 'State', None),
    ('Jalisco', 'State', None),
    ('México', 'State', None),
    ('Michoacán de Ocampo', 'State', None),
    ('Morelos', 'State', None),
    ('Nayarit', 'State', None),
    ('Nuevo León', 'State', None),
    ('Oaxaca', 'State', None),
    ('Puebla', 'State', None),
    ('Querétaro', 'State', None),
    ('Quintana Roo', 'State', None),
    ('Sinaloa', 'State', None),
    ('San Luis Potosí', 'State', None),
    ('Sonora', 'State', None),
    ('Tabasco', 'State', None),
    ('Tamaulipas', 'State', None),
    ('Tlaxcala', 'State', None),
    ('Veracruz de Ignacio de la Llave', 'State', None),
    ('Yucatán', 'State', None),
    ('Zacatecas', 'State', None),
    ('Johor', 'State', None),
    ('Kedah', 'State', None),
    ('Kelantan', 'State', None),
    ('Melaka', 'State', None),
    ('Negeri Sembilan', 'State', None),
    ('Pahang', 'State', None),
    ('Pulau Pinang', 'State', None),
    ('Perak', 'State', None),
    ('Perlis', 'State', None),
    ('Selangor', 'State', None),
    ('Terengganu', 'State', None),
    ('Sabah', 'State', None),
    ('Sarawak', 'State', None),
    ('Wilayah Persekutuan Kuala Lumpur', 'Federal territory', None),
    ('Wilayah Persekutuan Labuan', 'Federal territory', None),
    ('Wilayah Persekutuan Putrajaya', 'Federal territory', None),
    ('Niassa', 'Province', None),
    ('Manica', 'Province', None),
    ('Gaza', 'Province', None),
    ('Inhambane', 'Province', None),
    ('Maputo', 'Province', None),
    ('Maputo', 'City', None),
    ('Nampula', 'Province', None),
    ('Cabo Delgado', 'Province', None),
    ('Zambézia', 'Province', None),
    ('Sofala', 'Province', None),
    ('Tete', 'Province', None),
    ('Zambezi', 'Region', None),
    ('Erongo', 'Region', None),
    ('Hardap', 'Region', None),
    ('//Karas', 'Region', None),
    ('Kavango East', 'Region', None),
    ('Khomas', 'Region', None),
    ('Kunene', 'Region', None),
    ('Kavango West', 'Region', None),
    ('Otjozondjupa', 'Region', None),
    ('Omaheke', 'Region', None),
    ('Oshana', 'Region', None),
    ('Omusati', 'Region', None),
    ('Oshikoto', 'Region', None),
    ('Ohangwena', 'Region', None),
    ('Agadez', 'Region', None),
    ('Diffa', 'Region', None),
    ('Dosso', 'Region', None),
    ('Maradi', 'Region', None),
    ('Tahoua', 'Region', None),
    ('Tillabéri', 'Region', None),
    ('Zinder', 'Region', None),
    ('Niamey', 'Urban community', None),
    ('Abia', 'State', None),
    ('Adamawa', 'State', None),
    ('Akwa Ibom', 'State', None),
    ('Anambra', 'State', None),
    ('Bauchi', 'State', None),
    ('Benue', 'State', None),
    ('Borno', 'State', None),
    ('Bayelsa', 'State', None),
    ('Cross River', 'State', None),
    ('Delta', 'State', None),
    ('Ebonyi', 'State', None),
    ('Edo', 'State', None),
    ('Ekiti', 'State', None),
    ('Enugu', 'State', None),
    ('Abuja Federal Capital Territory', 'Capital territory', None),
    ('Gombe', 'State', None),
    ('Imo', 'State', None),
    ('Jigawa', 'State', None),
    ('Kaduna', 'State', None),
    ('Kebbi', 'State', None),
    ('Kano', 'State', None),
    ('Kogi', 'State', None),
    ('Katsina', 'State', None),
    ('Kwara', 'State', None),
    ('Lagos', 'State', None),
    ('Nasarawa', 'State', None),
    ('Niger', 'State', None),
    ('Ogun', 'State', None),
    ('Ondo', 'State', None),
    ('Osun', 'State', None),
    ('Oyo', 'State', None),
    ('Plateau', 'State', None),
    ('Rivers', 'State', None),
    ('Sokoto', 'State', None),
    ('Taraba', 'State', None),
    ('Yobe', 'State', None),
    ('Zamfara', 'State', None),
    ('Costa Caribe Norte', 'Autonomous region', None),
    ('Costa Caribe Sur', 'Autonomous region', None),
    ('Boaco', 'Department', None),
    ('Carazo', 'Department', None),
    ('Chinandega', 'Department', None),
    ('Chontales', 'Department', None),
    ('Estelí', 'Department', None),
    ('Granada', 'Department', None),
    ('Jinotega', 'Department', None),
    ('León', 'Department', None),
    ('Madriz', 'Department', None),
    ('Managua', 'Department', None),
    ('Masaya', 'Department', None),
    ('Matagalpa', 'Department', None),
    ('Nueva Segovia', 'Department', None),
    ('Rivas', 'Department', None),
    ('Río San Juan', 'Department', None),
    ('Aruba', 'Country', None),
    ('Bonaire', 'Special municipality', None),
    ('Saba', 'Special municipality', None),
    ('Sint Eustatius', 'Special municipality', None),
    ('Curaçao', 'Country', None),
    ('Drenthe', 'Province', None),
    ('Flevoland', 'Province', None),
    ('Fryslân', 'Province', None),
    ('Gelderland', 'Province', None),
    ('Groningen', 'Province', None),
    ('Limburg', 'Province', None),
    ('Noord-Brabant', 'Province', None),
    ('Noord-Holland', 'Province', None),
    ('Overijssel', 'Province', None),
    ('Sint Maarten', 'Country', None),
    ('Utrecht', 'Province', None),
    ('Zeeland', 'Province', None),
    ('Zuid-Holland', 'Province', None),
    ('Oslo', 'County', None),
    ('Rogaland', 'County', None),
    ('Møre og Romsdal', 'County', None),
    ('Nordland', 'County', None),
    ('Svalbard (Arctic Region)', 'Arctic region', None),
    ('Jan Mayen (Arctic Region)', 'Arctic region', None),
    ('Viken', 'County', None),
    ('Innlandet', 'County', None),
    ('Vestfold og Telemark', 'County', None),
    ('Agder', 'County', None),
    ('Vestland', 'County', None),
    ('Trööndelage', 'County', None),
    ('Romssa ja Finnmárkku', 'County', None),
    ('Central', 'Development region', None),
    ('Mid Western', 'Development region', None),
    ('Western', 'Development region', None),
    ('Eastern', 'Development region', None),
    ('Far Western', 'Development region', None),
    ('Bagmati', 'Zone', 'NP-1'),
    ('Bheri', 'Zone', 'NP-2'),
    ('Dhawalagiri', 'Zone', 'NP-3'),
    ('Gandaki', 'Zone', 'NP-3'),
    ('Janakpur', 'Zone', 'NP-1'),
    ('Karnali', 'Zone', 'NP-2'),
    ('Kosi', 'Zone', 'NP-4'),
    ('Lumbini', 'Zone', 'NP-3'),
    ('Mahakali', 'Zone', 'NP-5'),
    ('Mechi', 'Zone', 'NP-4'),
    ('Narayani', 'Zone', 'NP-1'),
    ('Province 1', 'Province', None),
    ('Province 2', 'Province', None),
    ('Bāgmatī', 'Province', None),
    ('Gandaki', 'Province', None),
    ('Province 5', 'Province', None),
    ('Karnali', 'Province', None),
    ('Sudūr Pashchim', 'Province', None),
    ('Rapti', 'Zone', 'NP-2'),
    ('Sagarmatha', 'Zone', 'NP-4'),
    ('Seti', 'Zone', 'NP-5'),
    ('Aiwo', 'District', None),
    ('Anabar', 'District', None),
    ('Anetan', 'District', None),
    ('Anibare', 'District', None),
    ('Baitsi', 'District', None),
    ('Boe', 'District', None),
    ('Buada', 'District', None),
    ('Denigomodu', 'District', None),
    ('Ewa', 'District', None),
    ('Ijuw', 'District', None),
    ('Meneng', 'District', None),
    ('Nibok', 'District', None),
    ('Uaboe', 'District', None),
    ('Yaren', 'District', None),
    ('Auckland', 'Region', None),
    ('Bay of Plenty', 'Region', None),
    ('Canterbury', 'Region', None),
    ('Chatham Islands Territory', 'Special island authority', None),
    ('Gisborne', 'Region', None),
    ("Hawke's Bay", 'Region', None),
    ('Marlborough', 'Region', None),
    ('Manawatu-Wanganui', 'Region', None),
    ('Nelson', 'Region', None),
    ('Northland', 'Region', None),
    ('Otago', 'Region', None),
    ('Southland', 'Region', None),
    ('Tasman', 'Region', None),
    ('Taranaki', 'Region', None),
    ('Wellington', 'Region', None),
    ('Waikato', 'Region', None),
    ('West Coast', 'Region', None),
    ('Janūb al Bāţinah', 'Governorate', None),
    ('Shamāl al Bāţinah', 'Governorate', None),
    ('Al Buraymī', 'Governorate', None),
    ('Ad Dākhilīyah', 'Governorate', None),
    ('Masqaţ', 'Governorate', None),
    ('Musandam', 'Governorate', None),
    ('Janūb ash Sharqīyah', 'Governorate', None),
    ('Shamāl ash Sharqīyah', 'Governorate', None),
    ('Al Wusţá', 'Governorate', None),
    ('Az̧ Z̧āhirah', 'Governorate', None),
    ('Z̧ufār', 'Governorate', None),
    ('Bocas del Toro', 'Province', None),
    ('Panamá Oeste', 'Province', None),
    ('Coclé', 'Province', None),
    ('Colón', 'Province', None),
    ('Chiriquí', 'Province', None),
    ('Darién', 'Province', None),
    ('Herrera', 'Province', None),
    ('Los Santos', 'Province', None),
    ('Panamá', 'Province', None),
    ('Veraguas', 'Province', None),
    ('Emberá', 'Indigenous region', None),
    ('Guna Yala', 'Indigenous region', None),
    ('Ngöbe-Buglé', 'Indigenous region', None),
    ('Amarumayu', 'Region', None),
    ('Ancash', 'Region', None),
    ('Apurimaq', 'Region', None),
    ('Arequipa', 'Region', None),
    ('Ayacucho', 'Region', None),
    ('Cajamarca', 'Region', None),
    ('El Callao', 'Region', None),
    ('Cusco', 'Region', None),
    ('Huánuco', 'Region', None),
    ('Huancavelica', 'Region', None),
    ('Ica', 'Region', None),
    ('Hunin', 'Region', None),
    ('La Libertad', 'Region', None),
    ('Lambayeque', 'Region', None),
    ('Lima', 'Region', None),
    ('Lima hatun llaqta', 'Municipality', None),
    ('Loreto', 'Region', None),
    ('Madre de Dios', 'Region', None),
    ('Moquegua', 'Region', None),
    ('Pasco', 'Region', None),
    ('Piura', 'Region', None),
    ('Puno', 'Region', None),
    ('San Martin', 'Region', None),
    ('Tacna', 'Region', None),
    ('Tumbes', 'Region', None),
    ('Ucayali', 'Region', None),
    ('Chimbu', 'Province', None),
    ('Central', 'Province', None),
    ('East New Britain', 'Province', None),
    ('Eastern Highlands', 'Province', None),
    ('Enga', 'Province', None),
    ('East Sepik', 'Province', None),
    ('Gulf', 'Province', None),
    ('Hela', 'Province', None),
    ('Jiwaka', 'Province', None),
    ('Milne Bay', 'Province', None),
    ('Morobe', 'Province', None),
    ('Madang', 'Province', None),
    ('Manus', 'Province', None),
    ('National Capital District (Port Moresby)', 'District', None),
    ('New Ireland', 'Province', None),
    ('Northern', 'Province', None),
    ('Bougainville', 'Autonomous region', None),
    ('West Sepik', 'Province', None),
    ('Southern Highlands', 'Province', None),
    ('West New Britain', 'Province', None),
    ('Western Highlands', 'Province', None),
    ('Western', 'Province', None),
    ('National Capital Region', 'Region', None),
    ('Ilocos (Region I)', 'Region', None),
    ('Cagayan Valley (Region II)', 'Region', None),
    ('Central Luzon (Region III)', 'Region', None),
    ('Bicol (Region V)', 'Region', None),
    ('Western Visayas (Region VI)', 'Region', None),
    ('Central Visayas (Region VII)', 'Region', None),
    ('Eastern Visayas (Region VIII)', 'Region', None),
    ('Zamboanga Peninsula (Region IX)', 'Region', None),
    ('Northern Mindanao (Region X)', 'Region', None),
    ('Davao (Region XI)', 'Region', None),
    ('Soccsksargen (Region XII)', 'Region', None),
    ('Caraga (Region XIII)', 'Region', None),
    ('Autonomous Region in Muslim Mindanao (ARMM)', 'Region', None),
    ('Cordillera Administrative Region (CAR)', 'Region', None),
    ('Calabarzon (Region IV-A)', 'Region', None),
    ('Mimaropa (Region IV-B)', 'Region', None),
    ('Abra', 'Province', 'PH-15'),
    ('Agusan del Norte', 'Province', 'PH-13'),
    ('Agusan del Sur', 'Province', 'PH-13'),
    ('Aklan', 'Province', 'PH-06'),
    ('Albay', 'Province', 'PH-05'),
    ('Antique', 'Province', 'PH-06'),
    ('Apayao', 'Province', 'PH-15'),
    ('Aurora', 'Province', 'PH-03'),
    ('Bataan', 'Province', 'PH-03'),
    ('Basilan', 'Province', 'PH-09'),
    ('Benguet', 'Province', 'PH-15'),
    ('Biliran', 'Province', 'PH-08'),
    ('Bohol', 'Province', 'PH-07'),
    ('Batangas', 'Province', 'PH-40'),
    ('Batanes', 'Province', 'PH-02'),
    ('Bukidnon', 'Province', 'PH-10'),
    ('Bulacan', 'Province', 'PH-03'),
    ('Cagayan', 'Province', 'PH-02'),
    ('Camiguin', 'Province', 'PH-10'),
    ('Camarines Norte', 'Province', 'PH-05'),
    ('Capiz', 'Province', 'PH-06'),
    ('Camarines Sur', 'Province', 'PH-05'),
    ('Catanduanes', 'Province', 'PH-05'),
    ('Cavite', 'Province', 'PH-40'),
    ('Cebu', 'Province', 'PH-07'),
    ('Davao de Oro', 'Province', 'PH-11'),
    ('Davao Oriental', 'Province', 'PH-11'),
    ('Davao del Sur', 'Province', 'PH-11'),
    ('Davao del Norte', 'Province', 'PH-11'),
    ('Dinagat Islands', 'Province', 'PH-13'),
    ('Davao Occidental', 'Province', 'PH-11'),
    ('Eastern Samar', 'Province', 'PH-08'),
    ('Guimaras', 'Province', 'PH-06'),
    ('Ifugao', 'Province', 'PH-15'),
    ('Iloilo', 'Province', 'PH-06'),
    ('Ilocos Norte', 'Province', 'PH-01'),
    ('Ilocos Sur', 'Province', 'PH-01'),
    ('Isabela', 'Province', 'PH-02'),
    ('Kalinga', 'Province', 'PH-15'),
    ('Laguna', 'Province', 'PH-40'),
    ('Lanao del Norte', 'Province', 'PH-12'),
    ('Lanao del Sur', 'Province', 'PH-14'),
    ('Leyte', 'Province', 'PH-08'),
    ('La Union', 'Province', 'PH-01'),
    ('Marinduque', 'Province', 'PH-41'),
    ('Maguindanao', 'Province', 'PH-14'),
    ('Masbate', 'Province', 'PH-05'),
    ('Mindoro Occidental', 'Province', 'PH-41'),
    ('Mindoro Oriental', 'Province', 'PH-41'),
    ('Mountain Province', 'Province', 'PH-15'),
    ('Misamis Occidental', 'Province', 'PH-10'),
    ('Misamis Oriental', 'Province', 'PH-10'),
    ('Cotabato', 'Province', 'PH-12'),
    ('Negros Occidental', 'Province', 'PH-06'),
    ('Negros Oriental', 'Province', 'PH-07'),
    ('Northern Samar', 'Province', 'PH-08'),
    ('Nueva Ecija', 'Province', 'PH-03'),
    ('Nueva Vizcaya', 'Province', 'PH-02'),
    ('Pampanga', 'Province', 'PH-03'),
    ('Pangasinan', 'Province', 'PH-01'),
    ('Palawan', 'Province', 'PH-41'),
    ('Quezon', 'Province', 'PH-40'),
    ('Quirino', 'Province', 'PH-02'),
    ('Rizal', 'Province', 'PH-40'),
    ('Romblon', 'Province', 'PH-41'),
    ('Sarangani', 'Province', 'PH-11'),
    ('South Cotabato', 'Province', 'PH-11'),
    ('Siquijor', 'Province', 'PH-07'),
    ('Southern Leyte', 'Province', 'PH-08'),
    ('Sulu', 'Province', 'PH-14'),
    ('Sorsogon', 'Province', 'PH-05'),
    ('Sultan Kudarat', 'Province', 'PH-12'),
    ('Surigao del Norte', 'Province', 'PH-13'),
    ('Surigao del Sur', 'Province', 'PH-13'),
    ('Tarlac', 'Province', 'PH-03'),
    ('Tawi-Tawi', 'Province', 'PH-14'),
    ('Samar', 'Province', 'PH-08'),
    ('Zamboanga del Norte', 'Province', 'PH-09'),
    ('Zamboanga del Sur', 'Province', 'PH-09'),
    ('Zambales', 'Province', 'PH-03'),
    ('Zamboanga Sibugay', 'Province', 'PH-09'),
    ('Balochistan', 'Province', None),
    ('Gilgit-Baltistan', 'Pakistan administered area', None),
    ('Islamabad', 'Federal capital territory', None),
    ('Azad Jammu and Kashmir', 'Pakistan administered area', None),
    ('Khyber Pakhtunkhwa', 'Province', None),
    ('Punjab', 'Province', None),
    ('Sindh', 'Province', None),
    ('Dolnośląskie', 'Voivodship', None),
    ('Kujawsko-pomorskie', 'Voivodship', None),
    ('Lubelskie', 'Voivodship', None),
    ('Lubuskie', 'Voivodship', None),
    ('Łódzkie', 'Voivodship', None),
    ('Małopolskie', 'Voivodship', None),
    ('Mazowieckie', 'Voivodship', None),
    ('Opolskie', 'Voivodship', None),
    ('Podkarpackie', 'Voivodship', None),
    ('Podlaskie', 'Voivodship', None),
    ('Pomorskie', 'Voivodship', None),
    ('Śląskie', 'Voivodship', None),
    ('Świętokrzyskie', 'Voivodship', None),
    ('Warmińsko-mazurskie', 'Voivodship', None),
    ('Wielkopolskie', 'Voivodship', None),
    ('Zachodniopomorskie', 'Voivodship', None),
    ('Bethlehem', 'Governorate', None),
    ('Deir El Balah', 'Governorate', None),
    ('Gaza', 'Governorate', None),
    ('Hebron', 'Governorate', None),
    ('Jerusalem', 'Governorate', None),
    ('Jenin', 'Governorate', None),
    ('Jericho and Al Aghwar', 'Governorate', None),
    ('Khan Yunis', 'Governorate', None),
    ('Nablus', 'Governorate', None),
    ('North Gaza', 'Governorate', None),
    ('Qalqilya', 'Governorate', None),
    ('Ramallah', 'Governorate', None),
    ('Rafah', 'Governorate', None),
    ('Salfit', 'Governorate', None),
    ('Tubas', 'Governorate', None),
    ('Tulkarm', 'Governorate', None),
    ('Aveiro', 'District', None),
    ('Beja', 'District', None),
    ('Braga', 'District', None),
    ('Bragança', 'District', None),
    ('Castelo Branco', 'District', None),
    ('Coimbra', 'District', None),
    ('Évora', 'District', None),
    ('Faro', 'District', None),
    ('Guarda', 'District', None),
    ('Leiria', 'District', None),
    ('Lisboa', 'District', None),
    ('Portalegre', 'District', None),
    ('Porto', 'District', None),
    ('Santarém', 'District', None),
    ('Setúbal', 'District', None),
    ('Viana do Castelo', 'District', None),
    ('Vila Real', 'District', None),
    ('Viseu', 'District', None),
    ('Região Autónoma dos Açores', 'Autonomous region', None),
    ('Região Autónoma da Madeira', 'Autonomous region', None),
    ('Aimeliik', 'State', None),
    ('Airai', 'State', None),
    ('Angaur', 'State', None),
    ('Hatohobei', 'State', None),
    ('Kayangel', 'State', None),
    ('Koror', 'State', None),
    ('Melekeok', 'State', None),
    ('Ngaraard', 'State', None),
    ('Ngarchelong', 'State', None),
    ('Ngardmau', 'State', None),
    ('Ngatpang', 'State', None),
    ('Ngchesar', 'State', None),
    ('Ngeremlengui', 'State', None),
    ('Ngiwal', 'State', None),
    ('Peleliu', 'State', None),
    ('Sonsorol', 'State', None),
    ('Concepción', 'Department', None),
    ('Alto Paraná', 'Department', None),
    ('Central', 'Department', None),
    ('Ñeembucú', 'Department', None),
    ('Amambay', 'Department', None),
    ('Canindeyú', 'Department', None),
    ('Presidente Hayes', 'Department', None),
    ('Alto Paraguay', 'Department', None),
    ('Boquerón', 'Department', None),
    ('San Pedro', 'Department', None),
    ('Cordillera', 'Department', None),
    ('Guairá', 'Department', None),
    ('Caaguazú', 'Department', None),
    ('Caazapá', 'Department', None),
    ('Itapúa', 'Department', None),
    ('Misiones', 'Department', None),
    ('Paraguarí', 'Department', None),
    ('Asunción', 'Capital', None),
    ('Ad Dawḩah', 'Municipality', None),
    ('Al Khawr wa adh Dhakhīrah', 'Municipality', None),
    ('Ash Shamāl', 'Municipality', None),
    ('Ar Rayyān', 'Municipality', None),
    ('Ash Shīḩānīyah', 'Municipality', None),
    ('Umm Şalāl', 'Municipality', None),
    ('Al Wakrah', 'Municipality', None),
    ('Az̧ Z̧a‘āyin', 'Municipality', None),
    ('Alba', 'Department', None),
    ('Argeș', 'Department', None),
    ('Arad', 'Department', None),
    ('București', 'Municipality', None),
    ('Bacău', 'Department', None),
    ('Bihor', 'Department', None),
    ('Bistrița-Năsăud', 'Department', None),
    ('Brăila', 'Department', None),
    ('Botoșani', 'Department', None),
    ('Brașov', 'Department', None),
    ('Buzău', 'Department', None),
    ('Cluj', 'Department', None),
    ('Călărași', 'Department', None),
    ('Caraș-Severin', 'Department', None),
    ('Constanța', 'Department', None),
    ('Covasna', 'Department', None),
    ('Dâmbovița', 'Department', None),
    ('Dolj', 'Department', None),
    ('Gorj', 'Department', None),
    ('Galați', 'Department', None),
    ('Giurgiu', 'Department', None),
    ('Hunedoara', 'Department', None),
    ('Harghita', 'Department', None),
    ('Ilfov', 'Department', None),
    ('Ialomița', 'Department', None),
    ('Iași', 'Department', None),
    ('Mehedinți', 'Department', None),
    ('Maramureș', 'Department', None),
    ('Mureș', 'Department', None),
    ('Neamț', 'Department', None),
    ('Olt', 'Department', None),
    ('Prahova', 'Department', None),
    ('Sibiu', 'Department', None),
    ('Sălaj', 'Department', None),
    ('Satu Mare', 'Department', None),
    ('Suceava', 'Department', None),
    ('Tulcea', 'Department', None),
    ('Timiș', 'Department', None),
    ('Teleorman', 'Department', None),
    ('Vâlcea', 'Department', None),
    ('Vrancea', 'Department', None),
    ('Vaslui', 'Department', None),
    ('Beograd', 'City', None),
    ('Severnobački okrug', 'District', 'RS-VO'),
    ('Srednjebanatski okrug', 'District', 'RS-VO'),
    ('Severnobanatski okrug', 'District', 'RS-VO'),
    ('Južnobanatski okrug', 'District', 'RS-VO'),
    ('Zapadnobački okrug', 'District', 'RS-VO'),
    ('Južnobački okrug', 'District', 'RS-VO'),
    ('Sremski okrug', 'District', 'RS-VO'),
    ('Mačvanski okrug', 'District', None),
    ('Kolubarski okrug', 'District', None),
    ('Podunavski okrug', 'District', None),
    ('Braničevski okrug', 'District', None),
    ('Šumadijski okrug', 'District', None),
    ('Pomoravski okrug', 'District', None),
    ('Borski okrug', 'District', None),
    ('Zaječarski okrug', 'District', None),
    ('Zlatiborski okrug', 'District', None),
    ('Moravički okrug', 'District', None),
    ('Raški okrug', 'District', None),
    ('Rasinski okrug', 'District', None),
    ('Nišavski okrug', 'District', None),
    ('Toplički okrug', 'District', None),
    ('Pirotski okrug', 'District', None),
    ('Jablanički okrug', 'District', None),
    ('Pčinjski okrug', 'District', None),
    ('Kosovski okrug', 'District', 'RS-KM'),
    ('Pećki okrug', 'District', 'RS-KM'),
    ('Prizrenski okrug', 'District', 'RS-KM'),
    ('Kosovsko-Mitrovački okrug', 'District', 'RS-KM'),
    ('Kosovsko-Pomoravski okrug', 'District', 'RS-KM'),
    ('Kosovo-Metohija', 'Autonomous province', None),
    ('Vojvodina', 'Autonomous province', None),
    ('Adygeja, Respublika', 'Republic', None),
    ('Altaj, Respublika', 'Republic', None),
    ('Altajskij kraj', 'Administrative territory', None),
    ("Amurskaja oblast'", 'Administrative region', None),
    ("Arhangel'skaja oblast'", 'Administrative region', None),
    ("Astrahanskaja oblast'", 'Administrative region', None),
    ('Bashkortostan, Respublika', 'Republic', None),
    ("Belgorodskaja oblast'", 'Administrative region', None),
    ("Brjanskaja oblast'", 'Administrative region', None),
    ('Burjatija, Respublika', 'Republic', None),
    ('Chechenskaya Respublika', 'Republic', None),
    ("Chelyabinskaya oblast'", 'Administrative region', None),
    ('Chukotskiy avtonomnyy okrug', 'Autonomous district', None),
    ('Chuvashskaya Respublika', 'Republic', None),
    ('Dagestan, Respublika', 'Republic', None),
    ('Ingushetiya, Respublika', 'Republic', None),
    ("Irkutskaja oblast'", 'Administrative region', None),
    ("Ivanovskaja oblast'", 'Administrative region', None),
    ('Kamchatskiy kray', 'Administrative territory', None),
    ('Kabardino-Balkarskaja Respublika', 'Republic', None),
    ('Karachayevo-Cherkesskaya Respublika', 'Republic', None),
    ('Krasnodarskij kraj', 'Administrative territory', None),
    ("Kemerovskaja oblast'", 'Administrative region', None),
    ("Kaliningradskaja oblast'", 'Administrative region', None),
    ("Kurganskaja oblast'", 'Administrative region', None),
    ('Habarovskij kraj', 'Administrative territory', None),
    ('Hanty-Mansijskij avtonomnyj okrug', 'Autonomous district', None),
    ("Kirovskaja oblast'", 'Administrative region', None),
    ('Hakasija, Respublika', 'Republic', None),
    ('Kalmykija, Respublika', 'Republic', None),
    ("Kaluzhskaya oblast'", 'Administrative region', None),
    ('Komi, Respublika', 'Republic', None),
    ("Kostromskaja oblast'", 'Administrative region', None),
    ('Karelija, Respublika', 'Republic', None),
    ("Kurskaja oblast'", 'Administrative region', None),
    ('Krasnojarskij kraj', 'Administrative territory', None),
    ("Leningradskaja oblast'", 'Administrative region', None),
    ("Lipeckaja oblast'", 'Administrative region', None),
    ("Magadanskaja oblast'", 'Administrative region', None),
    ('Marij Èl, Respublika', 'Republic', None),
    ('Mordovija, Respublika', 'Republic', None),
    ("Moskovskaja oblast'", 'Administrative region', None),
    ('Moskva', 'Autonomous city', None),
    ("Murmanskaja oblast'", 'Administrative region', None),
    ('Neneckij avtonomnyj okrug', 'Autonomous district', None),
    ("Novgorodskaja oblast'", 'Administrative region', None),
    ("Nizhegorodskaya oblast'", 'Administrative region', None),
    ("Novosibirskaja oblast'", 'Administrative region', None),
    ("Omskaja oblast'", 'Administrative region', None),
    ("Orenburgskaja oblast'", 'Administrative region', None),
    ("Orlovskaja oblast'", 'Administrative region', None),
    ('Permskij kraj', 'Administrative territory', None),
    ("Penzenskaja oblast'", 'Administrative region', None),
    ('Primorskij kraj', 'Administrative territory', None),
    ("Pskovskaja oblast'", 'Administrative region', None),
    ("Rostovskaja oblast'", 'Administrative region', None),
    ("Rjazanskaja oblast'", 'Administrative region', None),
    ('Saha, Respublika', 'Republic', None),
    ("Sahalinskaja oblast'", 'Administrative region', None),
    ("Samarskaja oblast'", 'Administrative region', None),
    ("Saratovskaja oblast'", 'Administrative region', None),
    ('Severnaja Osetija, Respublika', 'Republic', None),
    ("Smolenskaja oblast'", 'Administrative region', None),
    ('Sankt-Peterburg', 'Autonomous city', None),
    ("Stavropol'skij kraj", 'Administrative territory', None),
    ("Sverdlovskaja oblast'", 'Administrative region', None),
    ('Tatarstan, Respublika', 'Republic', None),
    ("Tambovskaja oblast'", 'Administrative region', None),
    ("Tomskaja oblast'", 'Administrative region', None),
    ("Tul'skaja oblast'", 'Administrative region', None),
    ("Tverskaja oblast'", 'Administrative region', None),
    ('Tyva, Respublika', 'Republic', None),
    ("Tjumenskaja oblast'", 'Administrative region', None),
    ('Udmurtskaja Respublika', 'Republic', None),
    ("Ul'janovskaja oblast'", 'Administrative region', None),
    ("Volgogradskaja oblast'", 'Administrative region', None),
    ("Vladimirskaja oblast'", 'Administrative region', None),
    ("Vologodskaja oblast'", 'Administrative region', None),
    ("Voronezhskaya oblast'", 'Administrative region', None),
    ('Jamalo-Neneckij avtonomnyj okrug', 'Autonomous district', None),
    ("Jaroslavskaja oblast'", 'Administrative region', None),
    ("Evrejskaja avtonomnaja oblast'", 'Autonomous region', None),
    ("Zabajkal'skij kraj", 'Administrative territory', None),
    ('City of Kigali', 'City', None),
    ('Eastern', 'Province', None),
    ('Northern', 'Province', None),
    ('Western', 'Province', None),
    ('Southern', 'Province', None),
    ('Ar Riyāḑ', 'Region', None),
    ('Makkah al Mukarramah', 'Region', None),
    ('Al Madīnah al Munawwarah', 'Region', None),
    ('Ash Sharqīyah', 'Region', None),
    ('Al Qaşīm', 'Region', None),
    ("Ḩā'il", 'Region', None),
    ('Tabūk', 'Region', None),
    ('Al Ḩudūd ash Shamālīyah', 'Region', None),
    ('Jāzān', 'Region', None),
    ('Najrān', 'Region', None),
    ('Al Bāḩah', 'Region', None),
    ('Al Jawf', 'Region', None),
    ("'Asīr", 'Region', None),
    ('Central', 'Province', None),
    ('Choiseul', 'Province', None),
    ('Capital Territory (Honiara)', 'Capital territory', None),
    ('Guadalcanal', 'Province', None),
    ('Isabel', 'Province', None),
    ('Makira-Ulawa', 'Province', None),
    ('Malaita', 'Province', None),
    ('Rennell and Bellona', 'Province', None),
    ('Temotu', 'Province', None),
    ('Western', 'Province', None),
    ('Anse aux Pins', 'District', None),
    ('Anse Boileau', 'District', None),
    ('Anse Etoile', 'District', None),
    ('Au Cap', 'District', None),
    ('Anse Royale', 'District', None),
    ('Baie Lazare', 'District', None),
    ('Baie Sainte Anne', 'District', None),
    ('Beau Vallon', 'District', None),
    ('Bel Air', 'District', None),
    ('Bel Ombre', 'District', None),
    ('Cascade', 'District', None),
    ('Glacis', 'District', None),
    ('Grand Anse Mahe', 'District', None),
    ('Grand Anse Praslin', 'District', None),
    ('La Digue', 'District', None),
    ('English River', 'District', None),
    ('Mont Buxton', 'District', None),
    ('Mont Fleuri', 'District', None),
    ('Plaisance', 'District', None),
    ('Pointe Larue', 'District', None),
    ('Port Glaud', 'District', None),
    ('Saint Louis', 'District', None),
    ('Takamaka', 'District', None),
    ('Les Mamelles', 'District', None),
    ('Roche Caiman', 'District', None),
    ('Ile Perseverance I', 'District', None),
    ('Ile Perseverance II', 'District', None),
    ('Central Darfur', 'State', None),
    ('East Darfur', 'State', None),
    ('North Darfur', 'State', None),
    ('South Darfur', 'State', None),
    ('West Darfur', 'State', None),
    ('Gedaref', 'State', None),
    ('West Kordofan', 'State', None),
    ('Gezira', 'State', None),
    ('Kassala', 'State', None),
    ('Khartoum', 'State', None),
    ('North Kordofan', 'State', None),
    ('South Kordofan', 'State', None),
    ('Blue Nile', 'State', None),
    ('Northern', 'State', None),
    ('River Nile', 'State', None),
    ('White Nile', 'State', None),
    ('Red Sea', 'State', None),
    ('Sennar', 'State', None),
    ('Stockholms län [SE-01]', 'County', None),
    ('Västerbottens län [SE-24]', 'County', None),
    ('Norrbottens län [SE-25]', 'County', None),
    ('Uppsala län [SE-03]', 'County', None),
    ('Södermanlands län [SE-04]', 'County', None),
    ('Östergötlands län [SE-05]', 'County', None),
    ('Jönköpings län [SE-06]', 'County', None),
    ('Kronobergs län [SE-07]', 'County', None),
    ('Kalmar län [SE-08]', 'County', None),
    ('Gotlands län [SE-09]', 'County', None),
    ('Blekinge län [SE-10]', 'County', None),
    ('Skåne län [SE-12]', 'County', None),
    ('Hallands län [SE-13]', 'County', None),
    ('Västra Götalands län [SE-14]', 'County', None),
    ('Värmlands län [SE-17]', 'County', None),
    ('Örebro län [SE-18]', 'County', None),
    ('Västmanlands län [SE-19]', 'County', None),
    ('Dalarnas län [SE-20]', 'County', None),
    ('Gävleborgs län [SE-21]', 'County', None),
    ('Västernorrlands län [SE-22]', 'County', None),
    ('Jämtlands län [SE-23]', 'County', None),
    ('Central Singapore', 'District', None),
    ('North East', 'District', None),
    ('North West', 'District', None),
    ('South East', 'District', None),
    ('South West', 'District', None),
    ('Ascension', 'Geographical entity', None),
    ('Saint Helena', 'Geographical entity', None),
    ('Tristan da Cunha', 'Geographical entity', None),
    ('Ajdovščina', 'Municipality', None),
    ('Beltinci', 'Municipality', None),
    ('Bled', 'Municipality', None),
    ('Bohinj', 'Municipality', None),
    ('Borovnica', 'Municipality', None),
    ('Bovec', 'Municipality', None),
    ('Brda', 'Municipality', None),
    ('Brezovica', 'Municipality', None),
    ('Brežice', 'Municipality', None),
    ('Tišina', 'Municipality', None),
    ('Celje', 'Municipality', None),
    ('Cerklje na Gorenjskem', 'Municipality', None),
    ('Cerknica', 'Municipality', None),
    ('Cerkno', 'Municipality', None),
    ('Črenšovci', 'Municipality', None),
    ('Črna na Koroškem', 'Municipality', None),
    ('Črnomelj', 'Municipality', None),
    ('Destrnik', 'Municipality', None),
    ('Divača', 'Municipality', None),
    ('Dobrepolje', 'Municipality', None),
    ('Dobrova-Polhov Gradec', 'Municipality', None),
    ('Dol pri Ljubljani', 'Municipality', None),
    ('Domžale', 'Municipality', None),
    ('Dornava', 'Municipality', None),
    ('Dravograd', 'Municipality', None),
    ('Duplek', 'Municipality', None),
    ('Gorenja vas-Poljane', 'Municipality', None),
    ('Gorišnica', 'Municipality', None),
    ('Gornja Radgona', 'Municipality', None),
    ('Gornji Grad', 'Municipality', None),
    ('Gornji Petrovci', 'Municipality', None),
    ('Grosuplje', 'Municipality', None),
    ('Šalovci', 'Municipality', None),
    ('Hrastnik', 'Municipality', None),
    ('Hrpelje-Kozina', 'Municipality', None),
    ('Idrija', 'Municipality', None),
    ('Ig', 'Municipality', None),
    ('Ilirska Bistrica', 'Municipality', None),
    ('Ivančna Gorica', 'Municipality', None),
    ('Izola', 'Municipality', None),
    ('Jesenice', 'Municipality', None),
    ('Juršinci', 'Municipality', None),
    ('Kamnik', 'Municipality', None),
    ('Kanal', 'Municipality', None),
    ('Kidričevo', 'Municipality', None),
    ('Kobarid', 'Municipality', None),
    ('Kobilje', 'Municipality', None),
    ('Kočevje', 'Municipality', None),
    ('Komen', 'Municipality', None),
    ('Koper', 'Municipality', None),
    ('Kozje', 'Municipality', None),
    ('Kranj', 'Municipality', None),
    ('Kranjska Gora', 'Municipality', None),
    ('Krško', 'Municipality', None),
    ('Kungota', 'Municipality', None),
    ('Kuzma', 'Municipality', None),
    ('Laško', 'Municipality', None),
    ('Lenart', 'Municipality', None),
    ('Lendava', 'Municipality', None),
    ('Litija', 'Municipality', None),
    ('Ljubljana', 'Municipality', None),
    ('Ljubno', 'Municipality', None),
    ('Ljutomer', 'Municipality', None),
    ('Logatec', 'Municipality', None),
    ('Loška dolina', 'Municipality', None),
    ('Loški Potok', 'Municipality', None),
    ('Luče', 'Municipality', None),
    ('Lukovica', 'Municipality', None),
    ('Majšperk', 'Municipality', None),
    ('Maribor', 'Municipality', None),
    ('Medvode', 'Municipality', None),
    ('Mengeš', 'Municipality', None),
    ('Metlika', 'Municipality', None),
    ('Mežica', 'Municipality', None),
    ('Miren-Kostanjevica', 'Municipality', None),
    ('Mislinja', 'Municipality', None),
    ('Moravče', 'Municipality', None),
    ('Moravske Toplice', 'Municipality', None),
    ('Mozirje', 'Municipality', None),
    ('Murska Sobota', 'Municipality', None),
    ('Muta', 'Municipality', None),
    ('Naklo', 'Municipality', None),
    ('Nazarje', 'Municipality', None),
    ('Nova Gorica', 'Municipality', None),
    ('Novo Mesto', 'Municipality', None),
    ('Odranci', 'Municipality', None),
    ('Ormož', 'Municipality', None),
    ('Osilnica', 'Municipality', None),
    ('Pesnica', 'Municipality', None),
    ('Piran', 'Municipality', None),
    ('Pivka', 'Municipality', None),
    ('Podčetrtek', 'Municipality', None),
    ('Podvelka', 'Municipality', None),
    ('Postojna', 'Municipality', None),
    ('Preddvor', 'Municipality', None),
    ('Ptuj', 'Municipality', None),
    ('Puconci', 'Municipality', None),
    ('Rače-Fram', 'Municipality', None),
    ('Radeče', 'Municipality', None),
    ('Radenci', 'Municipality', None),
    ('Radlje ob Dravi', 'Municipality', None),
    ('Radovljica', 'Municipality', None),
    ('Ravne na Koroškem', 'Municipality', None),
    ('Ribnica', 'Municipality', None),
    ('Rogašovci', 'Municipality', None),
    ('Rogaška Slatina', 'Municipality', None),
    ('Rogatec', 'Municipality', None),
    ('Ruše', 'Municipality', None),
    ('Semič', 'Municipality', None),
    ('Sevnica', 'Municipality', None),
    ('Sežana', 'Municipality', None),
    ('Slovenj Gradec', 'Municipality', None),
    ('Slovenska Bistrica', 'Municipality', None),
    ('Slovenske Konjice', 'Municipality', None),
    ('Starše', 'Municipality', None),
    ('Sveti Jurij ob Ščavnici', 'Municipality', None),
    ('Šenčur', 'Municipality', None),
    ('Šentilj', 'Municipality', None),
    ('Šentjernej', 'Municipality', None),
    ('Šentjur', 'Municipality', None),
    ('Škocjan', 'Municipality', None),
    ('Škofja Loka', 'Municipality', None),
    ('Škofljica', 'Municipality', None),
    ('Šmarje pri Jelšah', 'Municipality', None),
    ('Šmartno ob Paki', 'Municipality', None),
    ('Šoštanj', 'Municipality', None),
    ('Štore', 'Municipality', None),
    ('Tolmin', 'Municipality', None),
    ('Trbovlje', 'Municipality', None),
    ('Trebnje', 'Municipality', None),
    ('Tržič', 'Municipality', None),
    ('Turnišče', 'Municipality', None),
    ('Velenje', 'Municipality', None),
    ('Velike Lašče', 'Municipality', None),
    ('Videm', 'Municipality', None),
    ('Vipava', 'Municipality', None),
    ('Vitanje', 'Municipality', None),
    ('Vodice', 'Municipality', None),
    ('Vojnik', 'Municipality', None),
    ('Vrhnika', 'Municipality', None),
    ('Vuzenica', 'Municipality', None),
    ('Zagorje ob Savi', 'Municipality', None),
    ('Zavrč', 'Municipality', None),
    ('Zreče', 'Municipality', None),
    ('Železniki', 'Municipality', None),
    ('Žiri', 'Municipality', None),
    ('Benedikt', 'Municipality', None),
    ('Bistrica ob Sotli', 'Municipality', None),
    ('Bloke', 'Municipality', None),
    ('Braslovče', 'Municipality', None),
    ('Cankova', 'Municipality', None),
    ('Cerkvenjak', 'Municipality', None),
    ('Dobje', 'Municipality', None),
    ('Dobrna', 'Municipality', None),
    ('Dobrovnik', 'Municipality', None),
    ('Dolenjske Toplice', 'Municipality', None),
    ('Grad', 'Municipality', None),
    ('Hajdina', 'Municipality', None),
    ('Hoče-Slivnica', 'Municipality', None),
    ('Hodoš', 'Municipality', None),
    ('Horjul', 'Municipality', None),
    ('Jezersko', 'Municipality', None),
    ('Komenda', 'Municipality', None),
    ('Kostel', 'Municipality', None),
    ('Križevci', 'Municipality', None),
    ('Lovrenc na Pohorju', 'Municipality', None),
    ('Markovci', 'Municipality', None),
    ('Miklavž na Dravskem polju', 'Municipality', None),
    ('Mirna Peč', 'Municipality', None),
    ('Oplotnica', 'Municipality', None),
    ('Podlehnik', 'Municipality', None),
    ('Polzela', 'Municipality', None),
    ('Prebold', 'Municipality', None),
    ('Prevalje', 'Municipality', None),
    ('Razkrižje', 'Municipality', None),
    ('Ribnica na Pohorju', 'Municipality', None),
    ('Selnica ob Dravi', 'Municipality', None),
    ('Sodražica', 'Municipality', None),
    ('Solčava', 'Municipality', None),
    ('Sveta Ana', 'Municipality', None),
    ('Sveti Andraž v Slovenskih goricah', 'Municipality', None),
    ('Šempeter-Vrtojba', 'Municipality', None),
    ('Tabor', 'Municipality', None),
    ('Trnovska Vas', 'Municipality', None),
    ('Trzin', 'Municipality', None),
    ('Velika Polana', 'Municipality', None),
    ('Veržej', 'Municipality', None),
    ('Vransko', 'Municipality', None),
    ('Žalec', 'Municipality', None),
    ('Žetale', 'Municipality', None),
    ('Žirovnica', 'Municipality', None),
    ('Žužemberk', 'Municipality', None),
    ('Šmartno pri Litiji', 'Municipality', None),
    ('Apače', 'Municipality', None),
    ('Cirkulane', 'Municipality', None),
    ('Kosanjevica na Krki', 'Municipality', None),
    ('Makole', 'Municipality', None),
    ('Mokronog-Trebelno', 'Municipality', None),
    ('Poljčane', 'Municipality', None),
    ('Renče-Vogrsko', 'Municipality', None),
    ('Središče ob Dravi', 'Municipality', None),
    ('Straža', 'Municipality', None),
    ('Sveta Trojica v Slovenskih goricah', 'Municipality', None),
    ('Sveti Tomaž', 'Municipality', None),
    ('Šmarješke Toplice', 'Municipality', None),
    ('Gorje', 'Municipality', None),
    ('Log-Dragomer', 'Municipality', None),
    ('Rečica ob Savinji', 'Municipality', None),
    ('Sveti Jurij v Slovenskih goricah', 'Municipality', None),
    ('Šentrupert', 'Municipality', None),
    ('Mirna', 'Municipality', None),
    ('Ankaran', 'Municipality', None),
    ('Banskobystrický kraj', 'Region', None),
    ('Bratislavský kraj', 'Region', None),
    ('Košický kraj', 'Region', None),
    ('Nitriansky kraj', 'Region', None),
    ('Prešovský kraj', 'Region', None),
    ('Trnavský kraj', 'Region', None),
    ('Trenčiansky kraj', 'Region', None),
    ('Žilinský kraj', 'Region', None),
    ('Eastern', 'Province', None),
    ('Northern', 'Province', None),
    ('North Western', 'Province', None),
    ('Southern', 'Province', None),
    ('Western Area (Freetown)', 'Area', None),
    ('Acquaviva', 'Municipality', None),
    ('Chiesanuova', 'Municipality', None),
    ('Domagnano', 'Municipality', None),
    ('Faetano', 'Municipality', None),
    ('Fiorentino', 'Municipality', None),
    ('Borgo Maggiore', 'Municipality', None),
    ('Città di San Marino', 'Municipality', None),
    ('Montegiardino', 'Municipality', None),
    ('Serravalle', 'Municipality', None),
    ('Diourbel', 'Region', None),
    ('Dakar', 'Region', None),
    ('Fatick', 'Region', None),
    ('Kaffrine', 'Region', None),
    ('Kolda', 'Region', None),
    ('Kédougou', 'Region', None),
    ('Kaolack', 'Region', None),
    ('Louga', 'Region', None),
    ('Matam', 'Region', None),
    ('Sédhiou', 'Region', None),
    ('Saint-Louis', 'Region', None),
    ('Tambacounda', 'Region', None),
    ('Thiès', 'Region', None),
    ('Ziguinchor', 'Region', None),
    ('Awdal', 'Region', None),
    ('Bakool', 'Region', None),
    ('Banaadir', 'Region', None),
    ('Bari', 'Region', None),
    ('Bay', 'Region', None),
    ('Galguduud', 'Region', None),
    ('Gedo', 'Region', None),
    ('Hiiraan', 'Region', None),
    ('Jubbada Dhexe', 'Region', None),
    ('Jubbada Hoose', 'Region', None),
    ('Mudug', 'Region', None),
    ('Nugaal', 'Region', None),
    ('Sanaag', 'Region', None),
    ('Shabeellaha Dhexe', 'Region', None),
    ('Shabeellaha Hoose', 'Region', None),
    ('Sool', 'Region', None),
    ('Togdheer', 'Region', None),
    ('Woqooyi Galbeed', 'Region', None),
    ('Brokopondo', 'District', None),
    ('Commewijne', 'District', None),
    ('Coronie', 'District', None),
    ('Marowijne', 'District', None),
    ('Nickerie', 'District', None),
    ('Paramaribo', 'District', None),
    ('Para', 'District', None),
    ('Saramacca', 'District', None),
    ('Sipaliwini', 'District', None),
    ('Wanica', 'District', None),
    ('Northern Bahr el Ghazal', 'State', None),
    ('Western Bahr el Ghazal', 'State', None),
    ('Central Equatoria', 'State', None),
    ('Eastern Equatoria', 'State', None),
    ('Western Equatoria', 'State', None),
    ('Jonglei', 'State', None),
    ('Lakes', 'State', None),
    ('Upper Nile', 'State', None),
    ('Unity', 'State', None),
    ('Warrap', 'State', None),
    ('Água Grande', 'District', None),
    ('Cantagalo', 'District', None),
    ('Caué', 'District', None),
    ('Lembá', 'District', None),
    ('Lobata', 'District', None),
    ('Mé-Zóchi', 'District', None),
    ('Príncipe', 'Autonomous region', None),
    ('Ahuachapán', 'Department', None),
    ('Cabañas', 'Department', None),
    ('Chalatenango', 'Department', None),
    ('Cuscatlán', 'Department', None),
    ('La Libertad', 'Department', None),
    ('Morazán', 'Department', None),
    ('La Paz', 'Department', None),
    ('Santa Ana', 'Department', None),
    ('San Miguel', 'Department', None),
    ('Sonsonate', 'Department', None),
    ('San Salvador', 'Department', None),
    ('San Vicente', 'Department', None),
    ('La Unión', 'Department', None),
    ('Usulután', 'Department', None),
    ('Dimashq', 'Province', None),
    ("Dar'ā", 'Province', None),
    ('Dayr az Zawr', 'Province', None),
    ('Al Ḩasakah', 'Province', None),
    ('Ḩimş', 'Province', None),
    ('Ḩalab', 'Province', None),
    ('Ḩamāh', 'Province', None),
    ('Idlib', 'Province', None),
    ('Al Lādhiqīyah', 'Province', None),
    ('Al Qunayţirah', 'Province', None),
    ('Ar Raqqah', 'Province', None),
    ('Rīf Dimashq', 'Province', None),
    ("As Suwaydā'", 'Province', None),
    ('Ţarţūs', 'Province', None),
    ('Hhohho', 'Region', None),
    ('Lubombo', 'Region', None),
    ('Manzini', 'Region', None),
    ('Shiselweni', 'Region', None),
    ('Al Baţḩā’', 'Province', None),
    ('Bahr el Ghazal', 'Province', None),
    ('Borkou', 'Province', None),
    ('Chari-Baguirmi', 'Province', None),
    ('Ennedi-Est', 'Province', None),
    ('Ennedi-Ouest', 'Province', None),
    ('Guéra', 'Province', None),
    ('Hadjer Lamis', 'Province', None),
    ('Kanem', 'Province', None),
    ('Al Buḩayrah', 'Province', None),
    ('Logone-Occidental', 'Province', None),
    ('Logone-Oriental', 'Province', None),
    ('Mandoul', 'Province', None),
    ('Moyen-Chari', 'Province', None),
    ('Mayo-Kebbi-Est', 'Province', None),
    ('Mayo-Kebbi-Ouest', 'Province', None),
    ('Madīnat Injamīnā', 'Province', None),
    ('Ouaddaï', 'Province', None),
    ('Salamat', 'Province', None),
    ('Sila', 'Province', None),
    ('Tandjilé', 'Province', None),
    ('Tibastī', 'Province', None),
    ('Wadi Fira', 'Province', None),
    ('Centrale', 'Region', None),
    ('Kara', 'Region', None),
    ('Maritime (Région)', 'Region', None),
    ('Plateaux', 'Region', None),
    ('Savanes', 'Region', None),
    ('Krung Thep Maha Nakhon', 'Metropolitan administration', None),
    ('Samut Prakan', 'Province', None),
    ('Nonthaburi', 'Province', None),
    ('Pathum Thani', 'Province', None),
    ('Phra Nakhon Si Ayutthaya', 'Province', None),
    ('Ang Thong', 'Province', None),
    ('Lop Buri', 'Province', None),
    ('Sing Buri', 'Province', None),
    ('Chai Nat', 'Province', None),
    ('Saraburi', 'Province', None),
    ('Chon Buri', 'Province', None),
    ('Rayong', 'Province', None),
    ('Chanthaburi', 'Province', None),
    ('Trat', 'Province', None),
    ('Chachoengsao', 'Province', None),
    ('Prachin Buri', 'Province', None),
    ('Nakhon Nayok', 'Province', None),
    ('Sa Kaeo', 'Province', None),
    ('Nakhon Ratchasima', 'Province', None),
    ('Buri Ram', 'Province', None),
    ('Surin', 'Province', None),
    ('Si Sa Ket', 'Province', None),
    ('Ubon Ratchathani', 'Province', None),
    ('Yasothon', 'Province', None),
    ('Chaiyaphum', 'Province', None),
    ('Amnat Charoen', 'Province', None),
    ('Bueng Kan', 'Province', None),
    ('Nong Bua Lam Phu', 'Province', None),
    ('Khon Kaen', 'Province', None),
    ('Udon Thani', 'Province', None),
    ('Loei', 'Province', None),
    ('Nong Khai', 'Province', None),
    ('Maha Sarakham', 'Province', None),
    ('Roi Et', 'Province', None),
    ('Kalasin', 'Province', None),
    ('Sakon Nakhon', 'Province', None),
    ('Nakhon Phanom', 'Province', None),
    ('Mukdahan', 'Province', None),
    ('Chiang Mai', 'Province', None),
    ('Lamphun', 'Province', None),
    ('Lampang', 'Province', None),
    ('Uttaradit', 'Province', None),
    ('Phrae', 'Province', None),
    ('Nan', 'Province', None),
    ('Phayao', 'Province', None),
    ('Chiang Rai', 'Province', None),
    ('Mae Hong Son', 'Province', None),
    ('Nakhon Sawan', 'Province', None),
    ('Uthai Thani', 'Province', None),
    ('Kamphaeng Phet', 'Province', None),
    ('Tak', 'Province', None),
    ('Sukhothai', 'Province', None),
    ('Phitsanulok', 'Province', None),
    ('Phichit', 'Province', None),
    ('Phetchabun', 'Province', None),
    ('Ratchaburi', 'Province', None),
    ('Kanchanaburi', 'Province', None),
    ('Suphan Buri', 'Province', None),
    ('Nakhon Pathom', 'Province', None),
    ('Samut Sakhon', 'Province', None),
    ('Samut Songkhram', 'Province', None),
    ('Phetchaburi', 'Province', None),
    ('Prachuap Khiri Khan', 'Province', None),
    ('Nakhon Si Thammarat', 'Province', None),
    ('Krabi', 'Province', None),
    ('Phangnga', 'Province', None),
    ('Phuket', 'Province', None),
    ('Surat Thani', 'Province', None),
    ('Ranong', 'Province', None),
    ('Chumphon', 'Province', None),
    ('Songkhla', 'Province', None),
    ('Satun', 'Province', None),
    ('Trang', 'Province', None),
    ('Phatthalung', 'Province', None),
    ('Pattani', 'Province', None),
    ('Yala', 'Province', None),
    ('Narathiwat', 'Province', None),
    ('Phatthaya', 'Special administrative city', None),
    ('Dushanbe', 'Capital territory', None),
    ('Kŭhistoni Badakhshon', 'Autonomous region', None),
    ('Khatlon', 'Region', None),
    ('nohiyahoi tobei jumhurí', 'Districts under republic administration', None),
    ('Sughd', 'Region', None),
    ('Aileu', 'Municipality', None),
    ('Ainaro', 'Municipality', None),
    ('Baucau', 'Municipality', None),
    ('Bobonaro', 'Municipality', None),
    ('Cova Lima', 'Municipality', None),
    ('Díli', 'Municipality', None),
    ('Ermera', 'Municipality', None),
    ('Lautein', 'Municipality', None),
    ('Likisá', 'Municipality', None),
    ('Manufahi', 'Municipality', None),
    ('Manatuto', 'Municipality', None),
    ('Oekusi-Ambenu', 'Special administrative region', None),
    ('Vikeke', 'Municipality', None),
    ('Ahal', 'Region', None),
    ('Balkan', 'Region', None),
    ('Daşoguz', 'Region', None),
    ('Lebap', 'Region', None),
    ('Mary', 'Region', None),
    ('Aşgabat', 'City', None),
    ('Tunis', 'Governorate', None),
    ("L'Ariana", 'Governorate', None),
    ('Ben Arous', 'Governorate', None),
    ('La Manouba', 'Governorate', None),
    ('Nabeul', 'Governorate', None),
    ('Zaghouan', 'Governorate', None),
    ('Bizerte', 'Governorate', None),
    ('Béja', 'Governorate', None),
    ('Jendouba', 'Governorate', None),
    ('Le Kef', 'Governorate', None),
    ('Siliana', 'Governorate', None),
    ('Kairouan', 'Governorate', None),
    ('Kasserine', 'Governorate', None),
    ('Sidi Bouzid', 'Governorate', None),
    ('Sousse', 'Governorate', None),
    ('Monastir', 'Governorate', None),
    ('Mahdia', 'Governorate', None),
    ('Sfax', 'Governorate', None),
    ('Gafsa', 'Governorate', None),
    ('Tozeur', 'Governorate', None),
    ('Kébili', 'Governorate', None),
    ('Gabès', 'Governorate', None),
    ('Médenine', 'Governorate', None),
    ('Tataouine', 'Governorate', None),
    ("'Eua", 'Division', None),
    ("Ha'apai", 'Division', None),
    ('Niuas', 'Division', None),
    ('Tongatapu', 'Division', None),
    ("Vava'u", 'Division', None),
    ('Adana', 'Province', None),
    ('Adıyaman', 'Province', None),
    ('Afyonkarahisar', 'Province', None),
    ('Ağrı', 'Province', None),
    ('Amasya', 'Province', None),
    ('Ankara', 'Province', None),
    ('Antalya', 'Province', None),
    ('Artvin', 'Province', None),
    ('Aydın', 'Province', None),
    ('Balıkesir', 'Province', None),
    ('Bilecik', 'Province', None),
    ('Bingöl', 'Province', None),
    ('Bitlis', 'Province', None),
    ('Bolu', 'Province', None),
    ('Burdur', 'Province', None),
    ('Bursa', 'Province', None),
    ('Çanakkale', 'Province', None),
    ('Çankırı', 'Province', None),
    ('Çorum', 'Province', None),
    ('Denizli', 'Province', None),
    ('Diyarbakır', 'Province', None),
    ('Edirne', 'Province', None),
    ('Elazığ', 'Province', None),
    ('Erzincan', 'Province', None),
    ('Erzurum', 'Province', None),
    ('Eskişehir', 'Province', None),
    ('Gaziantep', 'Province', None),
    ('Giresun', 'Province', None),
    ('Gümüşhane', 'Province', None),
    ('Hakkâri', 'Province', None),
    ('Hatay', 'Province', None),
    ('Isparta', 'Province', None),
    ('Mersin', 'Province', None),
    ('İstanbul', 'Province', None),
    ('İzmir', 'Province', None),
    ('Kars', 'Province', None),
    ('Kastamonu', 'Province', None),
    ('Kayseri', 'Province', None),
    ('Kırklareli', 'Province', None),
    ('Kırşehir', 'Province', None),
    ('Kocaeli', 'Province', None),
    ('Konya', 'Province', None),
    ('Kütahya', 'Province', None),
    ('Malatya', 'Province', None),
    ('Manisa', 'Province', None),
    ('Kahramanmaraş', 'Province', None),
    ('Mardin', 'Province', None),
    ('Muğla', 'Province', None),
    ('Muş', 'Province', None),
    ('Nevşehir', 'Province', None),
    ('Niğde', 'Province', None),
    ('Ordu', 'Province', None),
    ('Rize', 'Province', None),
    ('Sakarya', 'Province', None),
    ('Samsun', 'Province', None),
    ('Siirt', 'Province', None),
    ('Sinop', 'Province', None),
    ('Sivas', 'Province', None),
    ('Tekirdağ', 'Province', None),
    ('Tokat', 'Province', None),
    ('Trabzon', 'Province', None),
    ('Tunceli', 'Province', None),
    ('Şanlıurfa', 'Province', None),
    ('Uşak', 'Province', None),
    ('Van', 'Province', None),
    ('Yozgat', 'Province', None),
    ('Zonguldak', 'Province', None),
    ('Aksaray', 'Province', None),
    ('Bayburt', 'Province', None),
    ('Karaman', 'Province', None),
    ('Kırıkkale', 'Province', None),
    ('Batman', 'Province', None),
    ('Şırnak', 'Province', None),
    ('Bartın', 'Province', None),
    ('Ardahan', 'Province', None),
    ('Iğdır', 'Province', None),
    ('Yalova', 'Province', None),
    ('Karabük', 'Province', None),
    ('Kilis', 'Province', None),
    ('Osmaniye', 'Province', None),
    ('Düzce', 'Province', None),
    ('Arima', 'Borough', None),
    ('Chaguanas', 'Borough', None),
    ('Couva-Tabaquite-Talparo', 'Region', None),
    ('Diego Martin', 'Region', None),
    ('Mayaro-Rio Claro', 'Region', None),
    ('Penal-Debe', 'Region', None),
    ('Port of Spain', 'City', None),
    ('Princes Town', 'Region', None),
    ('Point Fortin', 'Borough', None),
    ('San Fernando', 'City', None),
    ('Sangre Grande', 'Region', None),
    ('Siparia', 'Region', None),
    ('San Juan-Laventille', 'Region', None),
    ('Tobago', 'Ward', None),
    ('Tunapuna-Piarco', 'Region', None),
    ('Funafuti', 'Town council', None),
    ('Niutao', 'Island council', None),
    ('Nukufetau', 'Island council', None),
    ('Nukulaelae', 'Island council', None),
    ('Nanumea', 'Island council', None),
    ('Nanumaga', 'Island council', None),
    ('Nui', 'Island council', None),
    ('Vaitupu', 'Island council', None),
    ('Changhua', 'County', None),
    ('Chiayi', 'City', None),
    ('Chiayi', 'County', None),
    ('Hsinchu', 'County', None),
    ('Hsinchu', 'City', None),
    ('Hualien', 'County', None),
    ('Yilan', 'County', None),
    ('Keelung', 'City', None),
    ('Kaohsiung', 'Special municipality', None),
    ('Kinmen', 'County', None),
    ('Lienchiang', 'County', None),
    ('Miaoli', 'County', None),
    ('Nantou', 'County', None),
    ('New Taipei', 'Special municipality', None),
    ('Penghu', 'County', None),
    ('Pingtung', 'County', None),
    ('Taoyuan', 'Special municipality', None),
    ('Tainan', 'Special municipality', None),
    ('Taipei', 'Special municipality', None),
    ('Taitung', 'County', None),
    ('Taichung', 'Special municipality', None),
    ('Yunlin', 'County', None),
    ('Arusha', 'Region', None),
    ('Dar es Salaam', 'Region', None),
    ('Dodoma', 'Region', None),
    ('Iringa', 'Region', None),
    ('Kagera', 'Region', None),
    ('Pemba North', 'Region', None),
    ('Zanzibar North', 'Region', None),
    ('Kigoma', 'Region', None),
    ('Kilimanjaro', 'Region', None),
    ('Pemba South', 'Region', None),
    ('Zanzibar South', 'Region', None),
    ('Lindi', 'Region', None),
    ('Mara', 'Region', None),
    ('Mbeya', 'Region', None),
    ('Zanzibar West', 'Region', None),
    ('Morogoro', 'Region', None),
    ('Mtwara', 'Region', None),
    ('Mwanza', 'Region', None),
    ('Coast', 'Region', None),
    ('Rukwa', 'Region', None),
    ('Ruvuma', 'Region', None),
    ('Shinyanga', 'Region', None),
    ('Singida', 'Region', None),
    ('Tabora', 'Region', None),
    ('Tanga', 'Region', None),
    ('Manyara', 'Region', None),
    ('Geita', 'Region', None),
    ('Katavi', 'Region', None),
    ('Njombe', 'Region', None),
    ('Simiyu', 'Region', None),
    ('Songwe', 'Region', None),
    ('Vinnytska oblast', 'Region', None),
    ('Volynska oblast', 'Region', None),
    ('Luhanska oblast', 'Region', None),
    ('Dnipropetrovska oblast', 'Region', None),
    ('Donetska oblast', 'Region', None),
    ('Zhytomyrska oblast', 'Region', None),
    ('Zakarpatska oblast', 'Region', None),
    ('Zaporizka oblast', 'Region', None),
    ('Ivano-Frankivska oblast', 'Region', None),
    ('Kyiv', 'City', None),
    ('Kyivska oblast', 'Region', None),
    ('Kirovohradska oblast', 'Region', None),
    ('Sevastopol', 'City', None),
    ('Avtonomna Respublika Krym', 'Republic', None),
    ('Lvivska oblast', 'Region', None),
    ('Mykolaivska oblast', 'Region', None),
    ('Odeska oblast', 'Region', None),
    ('Poltavska oblast', 'Region', None),
    ('Rivnenska oblast', 'Region', None),
    ('Sumska oblast', 'Region', None),
    ('Ternopilska oblast', 'Region', None),
    ('Kharkivska oblast', 'Region', None),
    ('Khersonska oblast', 'Region', None),
    ('Khmelnytska oblast', 'Region', None),
    ('Cherkaska oblast', 'Region', None),
    ('Chernihivska oblast', 'Region', None),
    ('Chernivetska oblast', 'Region', None),
    ('Kalangala', 'District', 'UG-C'),
    ('Kampala', 'City', 'UG-C'),
    ('Kiboga', 'District', 'UG-C'),
    ('Luwero', 'District', 'UG-C'),
    ('Masaka', 'District', 'UG-C'),
    ('Mpigi', 'District', 'UG-C'),
    ('Mubende', 'District', 'UG-C'),
    ('Mukono', 'District', 'UG-C'),
    ('Nakasongola', 'District', 'UG-C'),
    ('Rakai', 'District', 'UG-C'),
    ('Sembabule', 'District', 'UG-C'),
    ('Kayunga', 'District', 'UG-C'),
    ('Wakiso', 'District', 'UG-C'),
    ('Lyantonde', 'District', 'UG-C'),
    ('Mityana', 'District', 'UG-C'),
    ('Nakaseke', 'District', 'UG-C'),
    ('Buikwe', 'District', 'UG-C'),
    ('Bukomansibi', 'District', 'UG-C'),
    ('Butambala', 'District', 'UG-C'),
    ('Buvuma', 'District', 'UG-C'),
    ('Gomba', 'District', 'UG-C'),
    ('Kalungu', 'District', 'UG-C'),
    ('Kyankwanzi', 'District', 'UG-C'),
    ('Lwengo', 'District', 'UG-C'),
    ('Kyotera', 'District', 'UG-C'),
    ('Kasanda', 'District', 'UG-C'),
    ('Bugiri', 'District', 'UG-E'),
    ('Busia', 'District', 'UG-E'),
    ('Iganga', 'District', 'UG-E'),
    ('Jinja', 'District', 'UG-E'),
    ('Kamuli', 'District', 'UG-E'),
    ('Kapchorwa', 'District', 'UG-E'),
    ('Katakwi', 'District', 'UG-E'),
    ('Kumi', 'District', 'UG-E'),
    ('Mbale', 'District', 'UG-E'),
    ('Pallisa', 'District', 'UG-E'),
    ('Soroti', 'District', 'UG-E'),
    ('Tororo', 'District', 'UG-E'),
    ('Kaberamaido', 'District', 'UG-E'),
    ('Mayuge', 'District', 'UG-E'),
    ('Sironko', 'District', 'UG-E'),
    ('Amuria', 'District', 'UG-E'),
    ('Budaka', 'District', 'UG-E'),
    ('Bududa', 'District', 'UG-E'),
    ('Bukedea', 'District', 'UG-E'),
    ('Bukwo', 'District', 'UG-E'),
    ('Butaleja', 'District', 'UG-E'),
    ('Kaliro', 'District', 'UG-E'),
    ('Manafwa', 'District', 'UG-E'),
    ('Namutumba', 'District', 'UG-E'),
    ('Bulambuli', 'District', 'UG-E'),
    ('Buyende', 'District', 'UG-E'),
    ('Kibuku', 'District', 'UG-E'),
    ('Kween', 'District', 'UG-E'),
    ('Luuka', 'District', 'UG-E'),
    ('Namayingo', 'District', 'UG-E'),
    ('Ngora', 'District', 'UG-E'),
    ('Serere', 'District', 'UG-E'),
    ('Butebo', 'District', 'UG-E'),
    ('Namisindwa', 'District', 'UG-E'),
    ('Bugweri', 'District', 'UG-E'),
    ('Kapelebyong', 'District', 'UG-E'),
    ('Kalaki', 'District', 'UG-E'),
    ('Adjumani', 'District', 'UG-N'),
    ('Apac', 'District', 'UG-N'),
    ('Arua', 'District', 'UG-N'),
    ('Gulu', 'District', 'UG-N'),
    ('Kitgum', 'District', 'UG-N'),
    ('Kotido', 'District', 'UG-N'),
    ('Lira', 'District', 'UG-N'),
    ('Moroto', 'District', 'UG-N'),
    ('Moyo', 'District', 'UG-N'),
    ('Nebbi', 'District', 'UG-N'),
    ('Nakapiripirit', 'District', 'UG-N'),
    ('Pader', 'District', 'UG-N'),
    ('Yumbe', 'District', 'UG-N'),
    ('Abim', 'District', 'UG-N'),
    ('Amolatar', 'District', 'UG-N'),
    ('Amuru', 'District', 'UG-N'),
    ('Dokolo', 'District', 'UG-N'),
    ('Kaabong', 'District', 'UG-N'),
    ('Koboko', 'District', 'UG-N'),
    ('Maracha', 'District', 'UG-N'),
    ('Oyam', 'District', 'UG-N'),
    ('Agago', 'District', 'UG-N'),
    ('Alebtong', 'District', 'UG-N'),
    ('Amudat', 'District', 'UG-N'),
    ('Kole', 'District', 'UG-N'),
    ('Lamwo', 'District', 'UG-N'),
    ('Napak', 'District', 'UG-N'),
    ('Nwoya', 'District', 'UG-N'),
    ('Otuke', 'District', 'UG-N'),
    ('Zombo', 'District', 'UG-N'),
    ('Omoro', 'District', 'UG-N'),
    ('Pakwach', 'District', 'UG-N'),
    ('Kwania', 'District', 'UG-N'),
    ('Nabilatuk', 'District', 'UG-N'),
    ('Karenga', 'District', 'UG-N'),
    ('Madi-Okollo', 'District', 'UG-N'),
    ('Obongi', 'District', 'UG-N'),
    ('Bundibugyo', 'District', 'UG-W'),
    ('Bushenyi', 'District', 'UG-W'),
    ('Hoima', 'District', 'UG-W'),
    ('Kabale', 'District', 'UG-W'),
    ('Kabarole', 'District', 'UG-W'),
    ('Kasese', 'District', 'UG-W'),
    ('Kibaale', 'District', 'UG-W'),
    ('Kisoro', 'District', 'UG-W'),
    ('Masindi', 'District', 'UG-W'),
    ('Mbarara', 'District', 'UG-W'),
    ('Ntungamo', 'District', 'UG-W'),
    ('Rukungiri', 'District', 'UG-W'),
    ('Kamwenge', 'District', 'UG-W'),
    ('Kanungu', 'District', 'UG-W'),
    ('Kyenjojo', 'District', 'UG-W'),
    ('Buliisa', 'District', 'UG-W'),
    ('Ibanda', 'District', 'UG-W'),
    ('Isingiro', 'District', 'UG-W'),
    ('Kiruhura', 'District', 'UG-W'),
    ('Buhweju', 'District', 'UG-W'),
    ('Kiryandongo', 'District', 'UG-W'),
    ('Kyegegwa', 'District', 'UG-W'),
    ('Mitooma', 'District', 'UG-W'),
    ('Ntoroko', 'District', 'UG-W'),
    ('Rubirizi', 'District', 'UG-W'),
    ('Sheema', 'District', 'UG-W'),
    ('Kagadi', 'District', 'UG-W'),
    ('Kakumiro', 'District', 'UG-W'),
    ('Rubanda', 'District', 'UG-W'),
    ('Bunyangabu', 'District', 'UG-W'),
    ('Rukiga', 'District', 'UG-W'),
    ('Kikuube', 'District', 'UG-W'),
    ('Kazo', 'District', 'UG-W'),
    ('Kitagwenda', 'District', 'UG-W'),
    ('Rwampara', 'District', 'UG-W'),
    ('Central', 'Geographical region', None),
    ('Eastern', 'Geographical region', None),
    ('Northern', 'Geographical region', None),
    ('Western', 'Geographical region', None),
    ('Johnston Atoll', 'Islands, groups of islands', None),
    ('Midway Islands', 'Islands, groups of islands', None),
    ('Navassa Island', 'Islands, groups of islands', None),
    ('Wake Island', 'Islands, groups of islands', None),
    ('Baker Island', 'Islands, groups of islands', None),
    ('Howland Island', 'Islands, groups of islands', None),
    ('Jarvis Island', 'Islands, groups of islands', None),
    ('Kingman Reef', 'Islands, groups of islands', None),
    ('Palmyra Atoll', 'Islands, groups of islands', None),
    ('Alaska', 'State', None),
    ('Alabama', 'State', None),
    ('Arkansas', 'State', None),
    ('American Samoa', 'Outlying area', None),
    ('Arizona', 'State', None),
    ('California', 'State', None),
    ('Colorado', 'State', None),
    ('Connecticut', 'State', None),
    ('District of Columbia', 'District', None),
    ('Delaware', 'State', None),
    ('Florida', 'State', None),
    ('Georgia', 'State', None),
    ('Guam', 'Outlying area', None),
    ('Hawaii', 'State', None),
    ('Iowa', 'State', None),
    ('Idaho', 'State', None),
    ('Illinois', 'State', None),
    ('Indiana', 'State', None),
    ('Kansas', 'State', None),
    ('Kentucky', 'State', None),
    ('Louisiana', 'State', None),
    ('Massachusetts', 'State', None),
    ('Maryland', 'State', None),
    ('Maine', 'State', None),
    ('Michigan', 'State', None),
    ('Minnesota', 'State', None),
    ('Missouri', 'State', None),
    ('Northern Mariana Islands', 'Outlying area', None),
    ('Mississippi', 'State', None),
    ('Montana', 'State', None),
    ('North Carolina', 'State', None),
    ('North Dakota', 'State', None),
    ('Nebraska', 'State', None),
    ('New Hampshire', 'State', None),
    ('New Jersey', 'State', None),
    ('New Mexico', 'State', None),
    ('Nevada', 'State', None),
    ('New York', 'State', None),
    ('Ohio', 'State', None),
    ('Oklahoma', 'State', None),
    ('Oregon', 'State', None),
    ('Pennsylvania', 'State', None),
    ('Puerto Rico', 'Outlying area', None),
    ('Rhode Island', 'State', None),
    ('South Carolina', 'State', None),
    ('South Dakota', 'State', None),
    ('Tennessee', 'State', None),
    ('Texas', 'State', None),
    ('United States Minor Outlying Islands', 'Outlying area', None),
    ('Utah', 'State', None),
    ('Virginia', 'State', None),
    ('Virgin Islands, U.S.', 'Outlying area', None),
    ('Vermont', 'State', None),
    ('Washington', 'State', None),
    ('Wisconsin', 'State', None),
    ('West Virginia', 'State', None),
    ('Wyoming', 'State', None),
    ('Artigas', 'Department', None),
    ('Canelones', 'Department', None),
    ('Cerro Largo', 'Department', None),
    ('Colonia', 'Department', None),
    ('Durazno', 'Department', None),
    ('Florida', 'Department', None),
    ('Flores', 'Department', None),
    ('Lavalleja', 'Department', None),
    ('Maldonado', 'Department', None),
    ('Montevideo', 'Department', None),
    ('Paysandú', 'Department', None),
    ('Río Negro', 'Department', None),
    ('Rocha', 'Department', None),
    ('Rivera', 'Department', None),
    ('Salto', 'Department', None),
    ('San José', 'Department', None),
    ('Soriano', 'Department', None),
    ('Tacuarembó', 'Department', None),
    ('Treinta y Tres', 'Department', None),
    ('Andijon', 'Region', None),
    ('Buxoro', 'Region', None),
    ('Farg‘ona', 'Region', None),
    ('Jizzax', 'Region', None),
    ('Namangan', 'Region', None),
    ('Navoiy', 'Region', None),
    ('Qashqadaryo', 'Region', None),
    ('Qoraqalpog‘iston Respublikasi', 'Republic', None),
    ('Samarqand', 'Region', None),
    ('Sirdaryo', 'Region', None),
    ('Surxondaryo', 'Region', None),
    ('Toshkent', 'City', None),
    ('Toshkent', 'Region', None),
    ('Xorazm', 'Region', None),
    ('Charlotte', 'Parish', None),
    ('Saint Andrew', 'Parish', None),
    ('Saint David', 'Parish', None),
    ('Saint George', 'Parish', None),
    ('Saint Patrick', 'Parish', None),
    ('Grenadines', 'Parish', None),
    ('Distrito Capital', 'Capital district', None),
    ('Anzoátegui', 'State', None),
    ('Apure', 'State', None),
    ('Aragua', 'State', None),
    ('Barinas', 'State', None),
    ('Bolívar', 'State', None),
    ('Carabobo', 'State', None),
    ('Cojedes', 'State', None),
    ('Falcón', 'State', None),
    ('Guárico', 'State', None),
    ('Lara', 'State', None),
    ('Mérida', 'State', None),
    ('Miranda', 'State', None),
    ('Monagas', 'State', None),
    ('Nueva Esparta', 'State', None),
    ('Portuguesa', 'State', None),
    ('Sucre', 'State', None),
    ('Táchira', 'State', None),
    ('Trujillo', 'State', None),
    ('Yaracuy', 'State', None),
    ('Zulia', 'State', None),
    ('Dependencias Federales', 'Federal dependency', None),
    ('La Guaira', 'State', None),
    ('Delta Amacuro', 'State', None),
    ('Amazonas', 'State', None),
    ('Lai Châu', 'Province', None),
    ('Lào Cai', 'Province', None),
    ('Hà Giang', 'Province', None),
    ('Cao Bằng', 'Province', None),
    ('Sơn La', 'Province', None),
    ('Yên Bái', 'Province', None),
    ('Tuyên Quang', 'Province', None),
    ('Lạng Sơn', 'Province', None),
    ('Quảng Ninh', 'Province', None),
    ('Hòa Bình', 'Province', None),
    ('Ninh Bình', 'Province', None),
    ('Thái Bình', 'Province', None),
    ('Thanh Hóa', 'Province', None),
    ('Nghệ An', 'Province', None),
    ('Hà Tĩnh', 'Province', None),
    ('Quảng Bình', 'Province', None),
    ('Quảng Trị', 'Province', None),
    ('Thừa Thiên-Huế', 'Province', None),
    ('Quảng Nam', 'Province', None),
    ('Kon Tum', 'Province', None),
    ('Quảng Ngãi', 'Province', None),
    ('Gia Lai', 'Province', None),
    ('Bình Định', 'Province', None),
    ('Phú Yên', 'Province', None),
    ('Đắk Lắk', 'Province', None),
    ('Khánh Hòa', 'Province', None),
    ('Lâm Đồng', 'Province', None),
    ('Ninh Thuận', 'Province', None),
    ('Tây Ninh', 'Province', None),
    ('Đồng Nai', 'Province', None),
    ('Bình Thuận', 'Province', None),
    ('Long An', 'Province', None),
    ('Bà Rịa - Vũng Tàu', 'Province', None),
    ('An Giang', 'Province', None),
    ('Đồng Tháp', 'Province', None),
    ('Tiền Giang', 'Province', None),
    ('Kiến Giang', 'Province', None),
    ('Vĩnh Long', 'Province', None),
    ('Bến Tre', 'Province', None),
    ('Trà Vinh', 'Province', None),
    ('Sóc Trăng', 'Province', None),
    ('Bắc Kạn', 'Province', None),
    ('Bắc Giang', 'Province', None),
    ('Bạc Liêu', 'Province', None),
    ('Bắc Ninh', 'Province', None),
    ('Bình Dương', 'Province', None),
    ('Bình Phước', 'Province', None),
    ('Cà Mau', 'Province', None),
    ('Hải Dương', 'Province', None),
    ('Hà Nam', 'Province', None),
    ('Hưng Yên', 'Province', None),
    ('Nam Định', 'Province', None),
    ('Phú Thọ', 'Province', None),
    ('Thái Nguyên', 'Province', None),
    ('Vĩnh Phúc', 'Province', None),
    ('Điện Biên', 'Province', None),
    ('Đắk Nông', 'Province', None),
    ('Hậu Giang', 'Province', None),
    ('Cần Thơ', 'Municipality', None),
    ('Đà Nẵng', 'Municipality', None),
    ('Hà Nội', 'Municipality', None),
    ('Hải Phòng', 'Municipality', None),
    ('Hồ Chí Minh', 'Municipality', None),
    ('Malampa', 'Province', None),
    ('Pénama', 'Province', None),
    ('Sanma', 'Province', None),
    ('Shéfa', 'Province', None),
    ('Taféa', 'Province', None),
    ('Torba', 'Province', None),
    ('Alo', 'Administrative precinct', None),
    ('Sigave', 'Administrative precinct', None),
    ('Uvea', 'Administrative precinct', None),
    ("A'ana", 'District', None),
    ('Aiga-i-le-Tai', 'District', None),
    ('Atua', 'District', None),
    ("Fa'asaleleaga", 'District', None),
    ("Gaga'emauga", 'District', None),
    ('Gagaifomauga', 'District', None),
    ('Palauli', 'District', None),
    ("Satupa'itea", 'District', None),
    ('Tuamasaga', 'District', None),
    ("Va'a-o-Fonoti", 'District', None),
    ('Vaisigano', 'District', None),
    ('Abyan', 'Governorate', None),
    ('‘Adan', 'Governorate', None),
    ('‘Amrān', 'Governorate', None),
    ('Al Bayḑā’', 'Governorate', None),
    ('Aḑ Ḑāli‘', 'Governorate', None),
    ('Dhamār', 'Governorate', None),
    ('Ḩaḑramawt', 'Governorate', None),
    ('Ḩajjah', 'Governorate', None),
    ('Al Ḩudaydah', 'Governorate', None),
    ('Ibb', 'Governorate', None),
    ('Al Jawf', 'Governorate', None),
    ('Laḩij', 'Governorate', None),
    ('Ma’rib', 'Governorate', None),
    ('Al Mahrah', 'Governorate', None),
    ('Al Maḩwīt', 'Governorate', None),
    ('Raymah', 'Governorate', None),
    ('Amānat al ‘Āşimah [city]', 'Municipality', None),
    ('Şāʻdah', 'Governorate', None),
    ('Shabwah', 'Governorate', None),
    ('Şanʻā’', 'Governorate', None),
    ('Arkhabīl Suquţrá', 'Governorate', None),
    ('Tāʻizz', 'Governorate', None),
    ('Eastern Cape', 'Province', None),
    ('Free State', 'Province', None),
    ('Gauteng', 'Province', None),
    ('Kwazulu-Natal', 'Province', None),
    ('Limpopo', 'Province', None),
    ('Mpumalanga', 'Province', None),
    ('Northern Cape', 'Province', None),
    ('North-West', 'Province', None),
    ('Western Cape', 'Province', None),
    ('Western', 'Province', None),
    ('Central', 'Province', None),
    ('Eastern', 'Province', None),
    ('Luapula', 'Province', None),
    ('Northern', 'Province', None),
    ('North-Western', 'Province', None),
    ('Southern', 'Province', None),
    ('Copperbelt', 'Province', None),
    ('Lusaka', 'Province', None),
    ('Muchinga', 'Province', None),
    ('Bulawayo', 'Province', None),
    ('Harare', 'Province', None),
    ('Manicaland', 'Province', None),
    ('Mashonaland Central', 'Province', None),
    ('Mashonaland East', 'Province', None),
    ('Midlands', 'Province', None),
    ('Matabeleland North', 'Province', None),
    ('Matabeleland South', 'Province', None),
    ('Masvingo', 'Province', None),
    ('Mashonaland West', 'Province', None),
)
