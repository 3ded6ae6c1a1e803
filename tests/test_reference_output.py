from seedavatar.kernel.avatar import generate_avatar

# Known-good output of the original generator, frozen so cached avatars stay valid.

AA_PASTEL_80 = (
    '<svg viewBox="0 0 36 36" fill="none" role="img" xmlns="http://www.w3.org/2000/svg" width="80" height="80">\n'
    '      <mask id="mask-2080" maskUnits="userSpaceOnUse" x="0" y="0" width="36" height="36">\n'
    '        <rect width="36" height="36" rx="72" fill="#FFFFFF"></rect>\n'
    '      </mask>\n'
    '      <g mask="url(#mask-2080)">\n'
    '        <rect width="36" height="36" fill="#FFD1DC"></rect>\n'
    '        <rect x="0" y="0" width="36" height="36" \n'
    '              transform="translate(-2 4) rotate(170 18 18) scale(1.05)" \n'
    '              fill="#FFE4B5" rx="36"></rect>\n'
    '        <g transform="translate(-2 4) rotate(5 18 18)">\n'
    '          <path d="M15 19c2 1 4 1 6 0" stroke="#FFFFFF" fill="none" strokeLinecap="round"/>\n'
    '          <rect x="13" y="15" width="1.5" height="2" rx="1" stroke="none" fill="#FFFFFF"></rect>\n'
    '          <rect x="21" y="15" width="1.5" height="2" rx="1" stroke="none" fill="#FFFFFF"></rect>\n'
    '        </g>\n'
    '      </g>\n'
    '    </svg>'
)

JOHN_DOE_VIBRANT_200 = (
    '<svg viewBox="0 0 36 36" fill="none" role="img" xmlns="http://www.w3.org/2000/svg" width="200" height="200">\n'
    '      <mask id="mask-1367319387" maskUnits="userSpaceOnUse" x="0" y="0" width="36" height="36">\n'
    '        <rect width="36" height="36" rx="72" fill="#FFFFFF"></rect>\n'
    '      </mask>\n'
    '      <g mask="url(#mask-1367319387)">\n'
    '        <rect width="36" height="36" fill="#0984E3"></rect>\n'
    '        <rect x="0" y="0" width="36" height="36" \n'
    '              transform="translate(-1 1) rotate(238 18 18) scale(0.96)" \n'
    '              fill="#6C5CE7" rx="36"></rect>\n'
    '        <g transform="translate(-1 1) rotate(8 18 18)">\n'
    '          <path d="M13,19 a1,0.75 0 0,0 10,0" fill="#FFFFFF"/>\n'
    '          <rect x="14" y="14" width="1.5" height="2" rx="1" stroke="none" fill="#FFFFFF"></rect>\n'
    '          <rect x="22" y="14" width="1.5" height="2" rx="1" stroke="none" fill="#FFFFFF"></rect>\n'
    '        </g>\n'
    '      </g>\n'
    '    </svg>'
)

POLYGENELUBRICANTS_MONOCHROME_16 = (
    '<svg viewBox="0 0 36 36" fill="none" role="img" xmlns="http://www.w3.org/2000/svg" width="16" height="16">\n'
    '      <mask id="mask-2147483648" maskUnits="userSpaceOnUse" x="0" y="0" width="36" height="36">\n'
    '        <rect width="36" height="36" rx="72" fill="#FFFFFF"></rect>\n'
    '      </mask>\n'
    '      <g mask="url(#mask-2147483648)">\n'
    '        <rect width="36" height="36" fill="#212529"></rect>\n'
    '        <rect x="0" y="0" width="36" height="36" \n'
    '              transform="translate(-4 -3) rotate(181 18 18) scale(0.9500000000000001)" \n'
    '              fill="#6C757D" rx="36"></rect>\n'
    '        <g transform="translate(-4 -3) rotate(3 18 18)">\n'
    '          <path d="M13,21 a1,0.75 0 0,0 10,0" fill="#FFFFFF"/>\n'
    '          <rect x="12" y="14" width="1.5" height="2" rx="1" stroke="none" fill="#FFFFFF"></rect>\n'
    '          <rect x="23" y="14" width="1.5" height="2" rx="1" stroke="none" fill="#FFFFFF"></rect>\n'
    '        </g>\n'
    '      </g>\n'
    '    </svg>'
)

JOHN_ENCODED_PASTEL_80 = (
    '<svg viewBox="0 0 36 36" fill="none" role="img" xmlns="http://www.w3.org/2000/svg" width="80" height="80">\n'
    '      <mask id="mask-390679042" maskUnits="userSpaceOnUse" x="0" y="0" width="36" height="36">\n'
    '        <rect width="36" height="36" rx="72" fill="#FFFFFF"></rect>\n'
    '      </mask>\n'
    '      <g mask="url(#mask-390679042)">\n'
    '        <rect width="36" height="36" fill="#F0FFF0"></rect>\n'
    '        <rect x="0" y="0" width="36" height="36" \n'
    '              transform="translate(-1 -3) rotate(107 18 18) scale(1.06)" \n'
    '              fill="#FFD1DC" rx="36"></rect>\n'
    '        <g transform="translate(-1 -3) rotate(2 18 18)">\n'
    '          <path d="M15 20c2 1 4 1 6 0" stroke="#FFFFFF" fill="none" strokeLinecap="round"/>\n'
    '          <rect x="15" y="15" width="1.5" height="2" rx="1" stroke="none" fill="#FFFFFF"></rect>\n'
    '          <rect x="23" y="15" width="1.5" height="2" rx="1" stroke="none" fill="#FFFFFF"></rect>\n'
    '        </g>\n'
    '      </g>\n'
    '    </svg>'
)

def test_aa_pastel():
    assert generate_avatar("AA", "pastel", 80) == AA_PASTEL_80

def test_empty_text_renders_placeholder_avatar():
    assert generate_avatar("", "pastel", 80) == AA_PASTEL_80

def test_john_doe_vibrant():
    assert generate_avatar("John Doe", "vibrant", 200) == JOHN_DOE_VIBRANT_200

def test_int32_min_digest_with_float_scale():
    svg = generate_avatar("polygenelubricants", "monochrome", 16)
    assert svg == POLYGENELUBRICANTS_MONOCHROME_16
    assert "scale(0.9500000000000001)" in svg

def test_clamped_size_matches_frozen_output():
    assert generate_avatar("polygenelubricants", "monochrome", 3) == POLYGENELUBRICANTS_MONOCHROME_16

def test_percent_encoded_text():
    assert generate_avatar("John%20Doe", "pastel", 80) == JOHN_ENCODED_PASTEL_80
